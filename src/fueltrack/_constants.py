"""Internal constants shared across the library."""

USER_AGENT = "fueltrack/1.0"
DEFAULT_TIMEOUT: float = 15.0

LOGIN_ENDPOINT = "login"
VEHICLES_ENDPOINT = "getVehicles"

# HTTP statuses that mean "your credentials/token are no good".
AUTH_REJECTED_STATUSES: frozenset[int] = frozenset({401, 403})
