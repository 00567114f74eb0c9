"""Account models: login credentials and the authenticated user."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fueltrack._normalize import safe_str
from fueltrack.models._base import FuelTrackBaseModel


class Credentials(BaseModel):
    """Body of the ``login`` request.

    Parameters
    ----------
    username : str
        Account name as typed by the user (surrounding whitespace removed).
    password : str
        Plaintext password. Never part of ``repr``.
    """

    model_config = ConfigDict(frozen=True)

    username: str
    password: str = Field(repr=False)

    @field_validator("username", mode="before")
    @classmethod
    def _strip_username(cls, value: Any) -> Any:
        return value.strip() if isinstance(value, str) else value


class User(FuelTrackBaseModel):
    """The authenticated user returned by ``login``."""

    id: str
    """Server-side user identifier (numeric ids are kept as text)."""
    username: str = ""
    """Account name echoed back by the server."""
    token: str = Field(repr=False)
    """Bearer token for authenticated endpoints."""

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value: Any) -> Any:
        return safe_str(value) if isinstance(value, (int, float)) else value
