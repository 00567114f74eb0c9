"""Terminal screens for the fuel tracking app."""

from fueltrack.screens._base import Screen
from fueltrack.screens.login_screen import LoginScreen
from fueltrack.screens.vehicle_detail_screen import VehicleDetailScreen
from fueltrack.screens.vehicle_list_screen import VehicleListScreen

__all__ = ["LoginScreen", "Screen", "VehicleDetailScreen", "VehicleListScreen"]
