"""Login screen."""

from __future__ import annotations

from fueltrack.screens._base import Screen, header
from fueltrack.viewmodels.login import LoginViewModel


class LoginScreen(Screen[LoginViewModel]):
    watched_fields = ("is_loading", "error")

    def render(self) -> str:
        vm = self.view_model
        lines = [header("FuelTrack: Sign in")]
        if vm.is_loading:
            lines.append(f"Signing in as {vm.username}...")
        elif vm.user is not None:
            lines.append(f"Signed in as {vm.user.username or vm.username}")
        if vm.error:
            lines.append(f"Error: {vm.error}")
        return "\n".join(lines)
