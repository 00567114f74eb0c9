"""Fuel purchase record."""

from __future__ import annotations

from typing import Any

from pydantic import field_validator, model_validator

from fueltrack._normalize import safe_float, safe_str
from fueltrack.models._base import ApiTimestamp, FuelTrackBaseModel


class FuelUp(FuelTrackBaseModel):
    """One fuel purchase for a vehicle."""

    id: str = ""
    vehicle_id: str = ""
    date: ApiTimestamp = None
    """When the purchase happened (UTC)."""
    odometer: float | None = None
    """Odometer reading at the pump, in miles."""
    gallons: float | None = None
    price_per_gallon: float | None = None
    total_cost: float | None = None
    """Amount paid. Derived from gallons x price when the server omits it."""
    station: str = ""

    @field_validator("id", "vehicle_id", mode="before")
    @classmethod
    def _coerce_str(cls, value: Any) -> str:
        return safe_str(value) or ""

    @field_validator("odometer", "gallons", "price_per_gallon", "total_cost", mode="before")
    @classmethod
    def _coerce_float(cls, value: Any) -> float | None:
        return safe_float(value)

    @model_validator(mode="after")
    def _derive_total_cost(self) -> FuelUp:
        if self.total_cost is None and self.gallons is not None and self.price_per_gallon is not None:
            object.__setattr__(self, "total_cost", round(self.gallons * self.price_per_gallon, 2))
        return self
