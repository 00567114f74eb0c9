"""Client configuration for fueltrack."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from fueltrack._constants import DEFAULT_TIMEOUT, USER_AGENT
from fueltrack.exceptions import FuelTrackConfigError


def _env_float(env_key: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise FuelTrackConfigError(f"{env_key} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class FuelTrackConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        Root URL of the fuel tracking API (e.g. ``"https://fuel.example.com/api"``).
        Endpoint names are appended to it.
    username : str or None
        Default account name used by :meth:`FuelTrackClient.login` when none
        is passed explicitly.
    password : str or None
        Default account password.
    timeout : float
        Total per-request timeout in seconds.
    session_ttl : float
        Seconds after which an authenticated session is treated as gone.
        The API does not advertise token expiry, so ``0`` (the default)
        keeps the session until logout or a ``401``.
    user_agent : str
        Value of the ``user-agent`` header.
    """

    base_url: str
    username: str | None = None
    password: str | None = None
    timeout: float = DEFAULT_TIMEOUT
    session_ttl: float = 0.0
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        if not self.base_url or not self.base_url.strip():
            raise FuelTrackConfigError("base_url must be set")
        if self.timeout <= 0:
            raise FuelTrackConfigError(f"timeout must be positive, got {self.timeout}")
        if self.session_ttl < 0:
            raise FuelTrackConfigError(f"session_ttl must not be negative, got {self.session_ttl}")

    def endpoint_url(self, endpoint: str) -> str:
        """Join *endpoint* onto the base URL with exactly one slash."""
        return f"{self.base_url.rstrip('/')}/{endpoint.lstrip('/')}"

    @classmethod
    def from_env(cls, **overrides: Any) -> FuelTrackConfig:
        """Create configuration from environment variables.

        Reads ``FUELTRACK_BASE_URL``, ``FUELTRACK_USERNAME``,
        ``FUELTRACK_PASSWORD``, ``FUELTRACK_TIMEOUT`` and
        ``FUELTRACK_SESSION_TTL``. Explicit keyword arguments override
        environment values; ``None`` overrides are ignored so CLI flags
        that were not given do not mask the environment.

        Raises
        ------
        FuelTrackConfigError
            If no base URL is available or a numeric variable is malformed.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "FUELTRACK_BASE_URL": "base_url",
            "FUELTRACK_USERNAME": "username",
            "FUELTRACK_PASSWORD": "password",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        timeout_env = env.get("FUELTRACK_TIMEOUT")
        if timeout_env is not None:
            config_kwargs["timeout"] = _env_float("FUELTRACK_TIMEOUT", timeout_env)

        ttl_env = env.get("FUELTRACK_SESSION_TTL")
        if ttl_env is not None:
            config_kwargs["session_ttl"] = _env_float("FUELTRACK_SESSION_TTL", ttl_env)

        config_kwargs.update({key: value for key, value in overrides.items() if value is not None})

        if "base_url" not in config_kwargs:
            raise FuelTrackConfigError("No API base URL (set FUELTRACK_BASE_URL or pass base_url)")

        return cls(**config_kwargs)
