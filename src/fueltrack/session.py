"""Session state for authenticated API calls."""

from __future__ import annotations

import time

from pydantic import BaseModel, ConfigDict, Field

from fueltrack.models.user import User


class Session(BaseModel):
    """Authenticated session held in memory after a successful login.

    Parameters
    ----------
    user : User
        The logged-in user, including the bearer token.
    created_at : float
        Monotonic timestamp (``time.monotonic()``) when the session
        was created.  Defaults to *now* if not provided.
    ttl : float
        Time-to-live in seconds.  ``inf`` means the session only ends on
        logout or when the server rejects the token.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_default=True,
    )

    user: User
    created_at: float = Field(default_factory=time.monotonic)
    ttl: float = float("inf")

    @property
    def token(self) -> str:
        return self.user.token

    @property
    def is_expired(self) -> bool:
        """Whether the session has exceeded its TTL."""
        return (time.monotonic() - self.created_at) >= self.ttl

    @property
    def age(self) -> float:
        """Seconds since the session was created."""
        return time.monotonic() - self.created_at
