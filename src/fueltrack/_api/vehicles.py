"""Vehicle list endpoint: GET getVehicles."""

from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from fueltrack._constants import VEHICLES_ENDPOINT
from fueltrack.exceptions import FuelTrackApiError
from fueltrack.models.vehicle import Vehicle

_logger = logging.getLogger(__name__)

# Envelope keys some deployments wrap the list in.
_LIST_KEYS: tuple[str, ...] = ("vehicles", "data")


def _unwrap_list(body: Any) -> list[Any]:
    if body is None:
        return []
    if isinstance(body, list):
        return body
    if isinstance(body, dict):
        for key in _LIST_KEYS:
            value = body.get(key)
            if isinstance(value, list):
                return value
    raise FuelTrackApiError(
        f"{VEHICLES_ENDPOINT} returned {type(body).__name__}, expected a list",
        code="invalid_payload",
        endpoint=VEHICLES_ENDPOINT,
    )


def parse_vehicle_list(body: Any) -> list[Vehicle]:
    """Parse the vehicle list response.

    Items that are not JSON objects are skipped.

    Raises
    ------
    FuelTrackApiError
        If the body is not a list (bare or wrapped) or an item does not
        validate.
    """
    vehicles: list[Vehicle] = []
    for item in _unwrap_list(body):
        if not isinstance(item, dict):
            _logger.debug("Skipping non-object vehicle entry: %r", item)
            continue
        try:
            vehicles.append(Vehicle.model_validate(item))
        except ValidationError as exc:
            raise FuelTrackApiError(
                f"{VEHICLES_ENDPOINT} returned an invalid vehicle: {exc.error_count()} invalid field(s)",
                code="invalid_payload",
                endpoint=VEHICLES_ENDPOINT,
            ) from exc
    return vehicles
