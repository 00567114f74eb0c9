"""Shared helpers for endpoint modules.

Maps transport failures onto the API exception hierarchy. Internal to
fueltrack and may change at any time.
"""

from __future__ import annotations

from fueltrack._constants import AUTH_REJECTED_STATUSES
from fueltrack.exceptions import (
    FuelTrackAuthenticationError,
    FuelTrackSessionExpiredError,
    FuelTrackTransportError,
)


def raise_for_auth_status(exc: FuelTrackTransportError, *, login: bool = False) -> None:
    """Re-raise *exc* as an authentication error when the status says so.

    Returns without raising for statuses that are not auth rejections;
    the caller then re-raises the original transport error.
    """
    if exc.status_code not in AUTH_REJECTED_STATUSES:
        return
    code = str(exc.status_code)
    if login:
        raise FuelTrackAuthenticationError(
            "Login failed: invalid username or password",
            code=code,
            endpoint=exc.endpoint,
        ) from exc
    raise FuelTrackSessionExpiredError(
        f"{exc.endpoint} rejected the session (HTTP {code}); log in again",
        code=code,
        endpoint=exc.endpoint,
    ) from exc
