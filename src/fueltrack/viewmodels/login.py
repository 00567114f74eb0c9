"""View state for the login screen."""

from __future__ import annotations

import logging

from pydantic import Field, PrivateAttr

from fueltrack.client import FuelTrackClient
from fueltrack.exceptions import FuelTrackError
from fueltrack.models.user import User
from fueltrack.viewmodels._observable import ObservableModel

_logger = logging.getLogger(__name__)


class LoginViewModel(ObservableModel):
    """Credentials being typed, plus the outcome of the last attempt."""

    username: str = ""
    password: str = Field(default="", repr=False)
    is_loading: bool = False
    error: str | None = None
    user: User | None = None

    _client: FuelTrackClient = PrivateAttr()

    def __init__(self, client: FuelTrackClient, **data: object) -> None:
        super().__init__(**data)
        self._client = client

    @property
    def can_submit(self) -> bool:
        return not self.is_loading and bool(self.username.strip()) and bool(self.password)

    async def submit(self) -> bool:
        """Log in with the current fields.

        Returns ``True`` on success. A call made while a login is already
        in flight is ignored and returns ``False``.
        """
        if self.is_loading:
            return False
        if not self.username.strip() or not self.password:
            self.error = None
            self.error = "Enter a username and password"
            return False

        self.error = None
        self.is_loading = True
        try:
            user = await self._client.login(self.username, self.password)
            self.password = ""
            self.user = user
        except FuelTrackError as exc:
            _logger.debug("Login failed", exc_info=True)
            self.error = str(exc)
            return False
        finally:
            self.is_loading = False
        return True

    def logout(self) -> None:
        self._client.logout()
        self.user = None
        self.error = None
