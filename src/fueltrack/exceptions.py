"""Custom exception hierarchy for fueltrack."""

from __future__ import annotations


class FuelTrackError(Exception):
    """Base exception for all fueltrack errors."""


class FuelTrackConfigError(FuelTrackError):
    """Invalid or missing configuration."""


class FuelTrackTransportError(FuelTrackError):
    """HTTP-level failure (network, non-2xx, invalid JSON)."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        endpoint: str = "",
    ) -> None:
        self.status_code = status_code
        self.endpoint = endpoint
        super().__init__(message)


class FuelTrackApiError(FuelTrackError):
    """API answered, but with a payload we cannot use."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "",
        endpoint: str = "",
    ) -> None:
        self.code = code
        self.endpoint = endpoint
        super().__init__(message)


class FuelTrackAuthenticationError(FuelTrackApiError):
    """Login failed or no session is available."""


class FuelTrackSessionExpiredError(FuelTrackAuthenticationError):
    """Bearer token rejected by the server.

    Raised when an authenticated call comes back with ``401``/``403``.
    The client drops its session when this happens; the caller has to
    log in again.
    """
