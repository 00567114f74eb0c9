"""Vehicle list screen."""

from __future__ import annotations

from fueltrack.screens._base import Screen, header
from fueltrack.viewmodels.vehicles import VehicleListViewModel


class VehicleListScreen(Screen[VehicleListViewModel]):
    watched_fields = ("vehicles", "is_loading", "error")
    help_text = "[#] open  [r] refresh  [l] log out  [q] quit"

    def render(self) -> str:
        vm = self.view_model
        lines = [header("Vehicles")]
        if vm.is_loading:
            lines.append("Loading vehicles...")
        if vm.error:
            lines.append(f"Error: {vm.error}")
        if vm.has_loaded and not vm.vehicles:
            lines.append("No vehicles on this account.")
        for number, vehicle in enumerate(vm.vehicles, start=1):
            row = f"{number:>3}. {vehicle.display_name}"
            if vehicle.vin:
                row += f"  VIN {vehicle.vin}"
            if vehicle.current_mileage is not None:
                row += f"  {vehicle.current_mileage:,.0f} mi"
            lines.append(row)
        return "\n".join(lines)
