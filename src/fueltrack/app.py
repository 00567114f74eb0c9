"""Interactive app: login -> vehicle list -> vehicle detail.

The app owns the single :class:`FuelTrackClient` shared by every view
model. Navigation follows the view state: a user appearing on the login
view model opens the vehicle list, a selection on the list opens the
detail screen.
"""

from __future__ import annotations

import asyncio
import getpass
import logging
import sys
from collections.abc import Callable
from typing import Any, TextIO

from fueltrack.client import FuelTrackClient
from fueltrack.screens import LoginScreen, Screen, VehicleDetailScreen, VehicleListScreen
from fueltrack.viewmodels import LoginViewModel, VehicleDetailViewModel, VehicleListViewModel

_logger = logging.getLogger(__name__)

LineReader = Callable[[str], str]


class FuelTrackApp:
    """Drives the three screens from line-based user input."""

    def __init__(
        self,
        client: FuelTrackClient,
        *,
        username: str | None = None,
        password: str | None = None,
        out: TextIO | None = None,
        read_line: LineReader | None = None,
        read_password: LineReader | None = None,
    ) -> None:
        self._client = client
        self._read_line = read_line or input
        self._read_password = read_password or getpass.getpass

        self.login = LoginViewModel(client, username=username or "", password=password or "")
        self.vehicle_list = VehicleListViewModel(client)
        self.detail = VehicleDetailViewModel()

        self.login_screen = LoginScreen(self.login, out=out)
        self.list_screen = VehicleListScreen(self.vehicle_list, out=out)
        self.detail_screen = VehicleDetailScreen(self.detail, out=out)
        self._out = out if out is not None else sys.stdout

        self.current: Screen[Any] | None = None
        self._needs_load = False

        self.login.subscribe(self._on_user_changed, "user")
        self.vehicle_list.subscribe(self._on_selection_changed, "selected")

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _show(self, screen: Screen[Any]) -> None:
        if self.current is screen:
            return
        if self.current is not None:
            self.current.detach()
        self.current = screen
        screen.attach()

    def _on_user_changed(self, _name: str, _old: Any, user: Any) -> None:
        if user is None:
            self._show(self.login_screen)
            self.vehicle_list.clear()
            self.detail.show(None)
            return
        self._needs_load = True
        self._show(self.list_screen)

    def _on_selection_changed(self, _name: str, _old: Any, vehicle: Any) -> None:
        if self.login.user is None:
            return
        if vehicle is None:
            self._show(self.list_screen)
            self.detail.show(None)
            return
        self.detail.show(vehicle)
        self._show(self.detail_screen)

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    async def _prompt(self, prompt: str, *, secret: bool = False) -> str | None:
        """Read one line off the event loop; ``None`` on end of input."""
        reader = self._read_password if secret else self._read_line
        try:
            line = await asyncio.to_thread(reader, prompt)
        except EOFError:
            return None
        return line.strip() if not secret else line

    def _say(self, message: str) -> None:
        self._out.write(message + "\n")
        self._out.flush()

    # ------------------------------------------------------------------
    # Screen steps. Each returns False when the user wants to quit.
    # ------------------------------------------------------------------

    async def _login_step(self) -> bool:
        default = self.login.username
        prompt = f"Username [{default}]: " if default else "Username: "
        username = await self._prompt(prompt)
        if username is None or username == "q":
            return False
        saved = self.login.password
        password = await self._prompt("Password [saved]: " if saved else "Password: ", secret=True)
        if password is None:
            return False
        self.login.username = username or default
        self.login.password = password or saved
        await self.login.submit()
        return True

    async def _list_step(self) -> bool:
        if self._needs_load:
            self._needs_load = False
            await self.vehicle_list.load()
            return True

        command = await self._prompt("> ")
        if command is None or command == "q":
            return False
        if command == "r":
            await self.vehicle_list.load()
        elif command == "l":
            self.login.logout()
        elif command.isdigit():
            self.vehicle_list.select(int(command) - 1)
        elif command:
            self._say(f"Unknown command: {command}")
        return True

    async def _detail_step(self) -> bool:
        command = await self._prompt("> ")
        if command is None or command == "q":
            return False
        if command == "b":
            self.vehicle_list.selected = None
        elif command:
            self._say(f"Unknown command: {command}")
        return True

    async def run(self) -> int:
        """Run until the user quits or input ends. Returns an exit code."""
        self._show(self.login_screen)
        while True:
            if self.current is self.login_screen:
                keep_going = await self._login_step()
            elif self.current is self.list_screen:
                keep_going = await self._list_step()
            else:
                keep_going = await self._detail_step()
            if not keep_going:
                break
        if self.current is not None:
            self.current.detach()
        _logger.debug("App finished")
        return 0
