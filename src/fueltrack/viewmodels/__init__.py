"""Observable view state bound to the screens."""

from fueltrack.viewmodels._observable import Listener, ObservableModel
from fueltrack.viewmodels.login import LoginViewModel
from fueltrack.viewmodels.vehicles import VehicleDetailViewModel, VehicleListViewModel

__all__ = [
    "Listener",
    "LoginViewModel",
    "ObservableModel",
    "VehicleDetailViewModel",
    "VehicleListViewModel",
]
