"""View state for the vehicle list and vehicle detail screens."""

from __future__ import annotations

import logging
from datetime import UTC, datetime

from pydantic import Field, PrivateAttr

from fueltrack.client import FuelTrackClient
from fueltrack.exceptions import FuelTrackError
from fueltrack.models.fuel_up import FuelUp
from fueltrack.models.vehicle import Vehicle
from fueltrack.viewmodels._observable import ObservableModel

_logger = logging.getLogger(__name__)

_OLDEST = datetime.min.replace(tzinfo=UTC)


class VehicleListViewModel(ObservableModel):
    """The account's vehicles and the one the user picked."""

    vehicles: list[Vehicle] = Field(default_factory=list)
    is_loading: bool = False
    has_loaded: bool = False
    error: str | None = None
    selected: Vehicle | None = None

    _client: FuelTrackClient = PrivateAttr()

    def __init__(self, client: FuelTrackClient, **data: object) -> None:
        super().__init__(**data)
        self._client = client

    async def load(self) -> bool:
        """Fetch the vehicle list. Previously loaded vehicles stay on failure."""
        if self.is_loading:
            return False

        self.error = None
        self.is_loading = True
        try:
            self.vehicles = await self._client.get_vehicles()
            self.has_loaded = True
        except FuelTrackError as exc:
            _logger.debug("Loading vehicles failed", exc_info=True)
            self.error = str(exc)
            return False
        finally:
            self.is_loading = False
        return True

    def select(self, choice: int | Vehicle) -> Vehicle | None:
        """Select a vehicle by list position (0-based) or by value."""
        if isinstance(choice, Vehicle):
            vehicle = choice
        elif 0 <= choice < len(self.vehicles):
            vehicle = self.vehicles[choice]
        else:
            self.error = f"No vehicle #{choice + 1}"
            return None
        self.error = None
        self.selected = vehicle
        return vehicle

    def clear(self) -> None:
        """Reset to the pre-login state."""
        self.selected = None
        self.vehicles = []
        self.has_loaded = False
        self.error = None


class VehicleDetailViewModel(ObservableModel):
    """A single vehicle, with fuel-up figures derived for display."""

    vehicle: Vehicle | None = None

    def show(self, vehicle: Vehicle | None) -> None:
        self.vehicle = vehicle

    @property
    def title(self) -> str:
        return self.vehicle.display_name if self.vehicle is not None else ""

    @property
    def mileage_text(self) -> str:
        if self.vehicle is None or self.vehicle.current_mileage is None:
            return "Unknown"
        return f"{self.vehicle.current_mileage:,.0f} mi"

    @property
    def fuel_ups(self) -> list[FuelUp]:
        """Fuel-ups, newest first (undated ones last)."""
        if self.vehicle is None:
            return []
        return sorted(
            self.vehicle.fuel_ups,
            key=lambda f: (f.date or _OLDEST, f.odometer if f.odometer is not None else -1.0),
            reverse=True,
        )

    @property
    def last_fuel_up(self) -> FuelUp | None:
        fuel_ups = self.fuel_ups
        return fuel_ups[0] if fuel_ups else None

    @property
    def total_spent(self) -> float:
        return round(sum(f.total_cost for f in self.fuel_ups if f.total_cost is not None), 2)

    @property
    def total_gallons(self) -> float:
        return round(sum(f.gallons for f in self.fuel_ups if f.gallons is not None), 3)
