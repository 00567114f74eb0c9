"""High-level async client for the fuel tracking API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from fueltrack._api._common import raise_for_auth_status
from fueltrack._api.login import build_login_request, parse_login_response
from fueltrack._api.vehicles import parse_vehicle_list
from fueltrack._constants import LOGIN_ENDPOINT, VEHICLES_ENDPOINT
from fueltrack._transport import HttpTransport, Transport
from fueltrack.config import FuelTrackConfig
from fueltrack.exceptions import (
    FuelTrackAuthenticationError,
    FuelTrackConfigError,
    FuelTrackError,
    FuelTrackSessionExpiredError,
    FuelTrackTransportError,
)
from fueltrack.models.user import Credentials, User
from fueltrack.models.vehicle import Vehicle
from fueltrack.session import Session

_logger = logging.getLogger(__name__)


class FuelTrackClient:
    """Async client for the fuel tracking API.

    One instance is shared by every screen of the app.

    Usage::

        async with FuelTrackClient(config) as client:
            await client.login("driver", "secret")
            vehicles = await client.get_vehicles()
    """

    def __init__(
        self,
        config: FuelTrackConfig,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config
        self._external_session = session is not None
        self._http_session = session
        self._external_transport = transport is not None
        self._transport: Transport | None = transport
        self._session: Session | None = None

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> FuelTrackClient:
        if self._external_transport:
            return self
        if self._http_session is None:
            self._http_session = aiohttp.ClientSession()
        self._transport = HttpTransport(self._config, self._http_session)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
        if not self._external_transport:
            self._transport = None
        self._session = None

    # ------------------------------------------------------------------
    # Authentication
    # ------------------------------------------------------------------

    @property
    def user(self) -> User | None:
        """The logged-in user, or ``None``."""
        session = self._live_session()
        return session.user if session is not None else None

    @property
    def is_authenticated(self) -> bool:
        return self._live_session() is not None

    async def login(self, username: str | None = None, password: str | None = None) -> User:
        """Authenticate and keep the returned bearer token in memory.

        Falls back to ``config.username``/``config.password`` for any
        argument left as ``None``.

        Raises
        ------
        FuelTrackConfigError
            If the username or password is blank (no request is sent).
        FuelTrackAuthenticationError
            If the server rejects the credentials or answers without a token.
        FuelTrackTransportError
            On network failures and unexpected HTTP statuses.
        """
        username = username if username is not None else self._config.username
        password = password if password is not None else self._config.password
        if not username or not username.strip():
            raise FuelTrackConfigError("Username is required")
        if not password:
            raise FuelTrackConfigError("Password is required")

        transport = self._require_transport()
        credentials = Credentials(username=username, password=password)
        self.invalidate_session()
        try:
            body = await transport.request(
                "POST",
                LOGIN_ENDPOINT,
                payload=build_login_request(credentials),
            )
        except FuelTrackTransportError as exc:
            raise_for_auth_status(exc, login=True)
            raise

        user = parse_login_response(body)
        ttl = self._config.session_ttl if self._config.session_ttl > 0 else float("inf")
        self._session = Session(user=user, ttl=ttl)
        _logger.info("Logged in as %s", user.username or credentials.username)
        return user

    def invalidate_session(self) -> None:
        """Forget the current session (next authenticated call needs a login)."""
        self._session = None

    def logout(self) -> None:
        """Drop the in-memory session. The API has no logout endpoint."""
        if self._session is not None:
            _logger.info("Logged out %s", self._session.user.username)
        self.invalidate_session()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            raise FuelTrackError("Client not initialized. Use 'async with FuelTrackClient(...) as client:'")
        return self._transport

    def _live_session(self) -> Session | None:
        session = self._session
        if session is not None and session.is_expired:
            _logger.debug("Session expired after %.0fs", session.age)
            self._session = None
            return None
        return session

    def _require_session(self) -> Session:
        session = self._live_session()
        if session is None:
            raise FuelTrackAuthenticationError("Not logged in")
        return session

    # ------------------------------------------------------------------
    # Read endpoints
    # ------------------------------------------------------------------

    async def get_vehicles(self) -> list[Vehicle]:
        """Fetch all vehicles associated with the account.

        Raises
        ------
        FuelTrackAuthenticationError
            If there is no live session (no request is sent).
        FuelTrackSessionExpiredError
            If the server rejects the token; the session is dropped.
        """
        session = self._require_session()
        transport = self._require_transport()
        try:
            body = await transport.request("GET", VEHICLES_ENDPOINT, token=session.token)
        except FuelTrackTransportError as exc:
            try:
                raise_for_auth_status(exc)
            except FuelTrackSessionExpiredError:
                self.invalidate_session()
                raise
            raise

        vehicles = parse_vehicle_list(body)
        _logger.debug("Fetched %d vehicle(s)", len(vehicles))
        return vehicles
