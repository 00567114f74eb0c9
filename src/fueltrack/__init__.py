"""fueltrack - Async Python client and terminal screens for a vehicle fuel-up API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fueltrack")
except PackageNotFoundError:
    __version__ = "0+local"
from fueltrack.client import FuelTrackClient
from fueltrack.config import FuelTrackConfig
from fueltrack.exceptions import (
    FuelTrackApiError,
    FuelTrackAuthenticationError,
    FuelTrackConfigError,
    FuelTrackError,
    FuelTrackSessionExpiredError,
    FuelTrackTransportError,
)
from fueltrack.models import Credentials, FuelUp, User, Vehicle

__all__ = [
    "__version__",
    "Credentials",
    "FuelTrackApiError",
    "FuelTrackAuthenticationError",
    "FuelTrackClient",
    "FuelTrackConfig",
    "FuelTrackConfigError",
    "FuelTrackError",
    "FuelTrackSessionExpiredError",
    "FuelTrackTransportError",
    "FuelUp",
    "User",
    "Vehicle",
]
