"""Data models for fuel tracking API records."""

from fueltrack.models._base import ApiTimestamp, FuelTrackBaseModel, parse_api_timestamp
from fueltrack.models.fuel_up import FuelUp
from fueltrack.models.user import Credentials, User
from fueltrack.models.vehicle import Vehicle

__all__ = [
    "ApiTimestamp",
    "Credentials",
    "FuelTrackBaseModel",
    "FuelUp",
    "User",
    "Vehicle",
    "parse_api_timestamp",
]
