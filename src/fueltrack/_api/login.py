"""Login endpoint: POST login."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from fueltrack._constants import LOGIN_ENDPOINT
from fueltrack._redact import redact_for_log
from fueltrack.exceptions import FuelTrackAuthenticationError
from fueltrack.models.user import Credentials, User

_logger = logging.getLogger(__name__)


def build_login_request(credentials: Credentials) -> dict[str, str]:
    """Build the JSON body for the login endpoint."""
    return {"username": credentials.username, "password": credentials.password}


def parse_login_response(body: Any) -> User:
    """Parse the login response into a :class:`User`.

    Parameters
    ----------
    body : Any
        Decoded JSON body, expected to be ``{"id", "username", "token"}``.

    Raises
    ------
    FuelTrackAuthenticationError
        If the body is not an object or lacks the ``id``/``token`` fields.
    """
    _logger.debug("login response parsed=%s", redact_for_log(body))
    if not isinstance(body, dict):
        raise FuelTrackAuthenticationError(
            "Login response is not a JSON object",
            endpoint=LOGIN_ENDPOINT,
        )
    if body.get("token") in (None, "") or body.get("id") in (None, ""):
        raise FuelTrackAuthenticationError(
            "Login response missing id or token",
            endpoint=LOGIN_ENDPOINT,
        )
    try:
        return User.model_validate(body)
    except ValidationError as exc:
        raise FuelTrackAuthenticationError(
            f"Login response is malformed: {exc.error_count()} invalid field(s)",
            endpoint=LOGIN_ENDPOINT,
        ) from exc
