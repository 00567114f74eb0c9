from __future__ import annotations

from collections.abc import AsyncIterator
from dataclasses import dataclass, field
from typing import Any

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from fueltrack.config import FuelTrackConfig


def _default_vehicles() -> list[dict[str, Any]]:
    return [
        {
            "id": 1,
            "vin": "1HGCM82633A004352",
            "make": "Honda",
            "model": "Civic",
            "year": 2019,
            "currentMileage": 45210,
            "fuelUps": [
                {
                    "id": 10,
                    "vehicleId": 1,
                    "date": "2024-04-20",
                    "odometer": 44900,
                    "gallons": 9.8,
                    "pricePerGallon": 3.459,
                    "station": "Shell",
                },
                {
                    "id": 11,
                    "vehicleId": 1,
                    "date": "2024-05-01",
                    "odometer": 45200,
                    "gallons": 10.2,
                    "pricePerGallon": 3.5,
                },
            ],
        },
        {
            "id": 2,
            "vin": "5YJ3E1EA7KF317000",
            "make": "Ford",
            "model": "F-150",
            "year": "2021",
            "currentMileage": "18000.5",
        },
    ]


@dataclass
class FakeFuelApi:
    """In-process stand-in for the remote fuel tracking API."""

    users: dict[str, str] = field(default_factory=lambda: {"driver": "secret"})
    token: str = "tok-123"
    vehicles: Any = field(default_factory=_default_vehicles)
    vehicles_status: int | None = None
    calls: list[str] = field(default_factory=list)
    seen_auth: list[str | None] = field(default_factory=list)
    login_bodies: list[Any] = field(default_factory=list)

    async def _login(self, request: web.Request) -> web.Response:
        self.calls.append("login")
        body = await request.json()
        self.login_bodies.append(body)
        username = body.get("username")
        if self.users.get(username) != body.get("password"):
            return web.json_response({"message": "Invalid credentials"}, status=401)
        return web.json_response({"id": 7, "username": username, "token": self.token})

    async def _get_vehicles(self, request: web.Request) -> web.Response:
        self.calls.append("getVehicles")
        auth = request.headers.get("Authorization")
        self.seen_auth.append(auth)
        if auth != f"Bearer {self.token}":
            return web.json_response({"message": "Unauthorized"}, status=401)
        if self.vehicles_status is not None:
            return web.json_response({"error": "backend exploded"}, status=self.vehicles_status)
        return web.json_response(self.vehicles)

    def app(self) -> web.Application:
        app = web.Application()
        app.router.add_post("/api/login", self._login)
        app.router.add_get("/api/getVehicles", self._get_vehicles)
        return app


@pytest.fixture
def fake_api() -> FakeFuelApi:
    return FakeFuelApi()


@pytest_asyncio.fixture
async def api_server(fake_api: FakeFuelApi) -> AsyncIterator[TestServer]:
    server = TestServer(fake_api.app())
    await server.start_server()
    try:
        yield server
    finally:
        await server.close()


@pytest.fixture
def config(api_server: TestServer) -> FuelTrackConfig:
    return FuelTrackConfig(base_url=f"http://{api_server.host}:{api_server.port}/api", timeout=5)
