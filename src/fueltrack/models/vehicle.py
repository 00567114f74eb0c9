"""Vehicle model."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import Field, ValidationError, field_validator

from fueltrack._normalize import safe_float, safe_int, safe_str
from fueltrack.models._base import FuelTrackBaseModel
from fueltrack.models.fuel_up import FuelUp

_logger = logging.getLogger(__name__)


class Vehicle(FuelTrackBaseModel):
    """A vehicle associated with the user's account.

    Fields are mapped from the ``getVehicles`` response.
    """

    id: str = ""
    """Server-side vehicle identifier."""
    vin: str = ""
    """Vehicle Identification Number."""
    make: str = ""
    """Manufacturer (e.g. ``"Honda"``)."""
    model: str = ""
    """Model name (e.g. ``"Civic"``)."""
    year: int | None = None
    """Model year."""
    current_mileage: float | None = None
    """Odometer reading in miles."""
    fuel_ups: list[FuelUp] = Field(default_factory=list)
    """Fuel purchases, when the server embeds them in the vehicle record."""

    @property
    def display_name(self) -> str:
        """``"2019 Honda Civic"``, falling back to the VIN or the id."""
        parts = [str(part) for part in (self.year, self.make, self.model) if part]
        if parts:
            return " ".join(parts)
        if self.vin:
            return self.vin
        return f"Vehicle {self.id}" if self.id else "Unknown vehicle"

    @field_validator("id", "vin", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return safe_str(value) or ""

    @field_validator("year", mode="before")
    @classmethod
    def _coerce_year(cls, value: Any) -> int | None:
        return safe_int(value)

    @field_validator("current_mileage", mode="before")
    @classmethod
    def _coerce_mileage(cls, value: Any) -> float | None:
        return safe_float(value)

    @field_validator("fuel_ups", mode="before")
    @classmethod
    def _drop_malformed_fuel_ups(cls, value: Any) -> list[FuelUp]:
        """Validate each fuel-up on its own, dropping the ones that fail."""
        if not isinstance(value, list):
            return []
        fuel_ups: list[FuelUp] = []
        for item in value:
            if isinstance(item, FuelUp):
                fuel_ups.append(item)
                continue
            if not isinstance(item, dict):
                _logger.debug("Skipping non-object fuel-up entry: %r", item)
                continue
            try:
                fuel_ups.append(FuelUp.model_validate(item))
            except ValidationError as exc:
                _logger.debug("Skipping invalid fuel-up %r: %s", item.get("id"), exc)
        return fuel_ups
