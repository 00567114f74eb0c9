"""Vehicle detail screen."""

from __future__ import annotations

from fueltrack.models.fuel_up import FuelUp
from fueltrack.screens._base import Screen, header
from fueltrack.viewmodels.vehicles import VehicleDetailViewModel


def _fuel_up_row(fuel_up: FuelUp) -> str:
    parts = [fuel_up.date.strftime("%Y-%m-%d") if fuel_up.date is not None else "----------"]
    if fuel_up.odometer is not None:
        parts.append(f"{fuel_up.odometer:,.0f} mi")
    if fuel_up.gallons is not None:
        gallons = f"{fuel_up.gallons:.3f} gal"
        if fuel_up.price_per_gallon is not None:
            gallons += f" @ ${fuel_up.price_per_gallon:.3f}"
        parts.append(gallons)
    if fuel_up.total_cost is not None:
        parts.append(f"${fuel_up.total_cost:,.2f}")
    if fuel_up.station:
        parts.append(fuel_up.station)
    return "  " + "  ".join(parts)


class VehicleDetailScreen(Screen[VehicleDetailViewModel]):
    watched_fields = ("vehicle",)
    help_text = "[b] back  [q] quit"

    def render(self) -> str:
        vm = self.view_model
        vehicle = vm.vehicle
        if vehicle is None:
            return header("Vehicle") + "\nNo vehicle selected."

        lines = [
            header(vm.title),
            f"VIN:      {vehicle.vin or '-'}",
            f"Make:     {vehicle.make or '-'}",
            f"Model:    {vehicle.model or '-'}",
            f"Year:     {vehicle.year if vehicle.year is not None else '-'}",
            f"Mileage:  {vm.mileage_text}",
        ]
        fuel_ups = vm.fuel_ups
        if fuel_ups:
            lines.append(
                f"Fuel-ups: {len(fuel_ups)} (total ${vm.total_spent:,.2f}, {vm.total_gallons:,.1f} gal)"
            )
            lines.extend(_fuel_up_row(fuel_up) for fuel_up in fuel_ups)
        else:
            lines.append("Fuel-ups: none recorded")
        return "\n".join(lines)
