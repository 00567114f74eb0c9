from __future__ import annotations

import asyncio
from datetime import UTC, datetime
from typing import Any

import pytest

from fueltrack.exceptions import FuelTrackAuthenticationError, FuelTrackTransportError
from fueltrack.models import FuelUp, User, Vehicle
from fueltrack.viewmodels import (
    LoginViewModel,
    ObservableModel,
    VehicleDetailViewModel,
    VehicleListViewModel,
)

_USER = User(id="7", username="driver", token="tok-123")


class _StubClient:
    """Just enough of FuelTrackClient for the view models."""

    def __init__(self) -> None:
        self.login_result: User | Exception = _USER
        self.vehicles_result: list[Vehicle] | Exception = []
        self.login_calls: list[tuple[str, str]] = []
        self.logged_out = False
        self.gate: asyncio.Event | None = None

    async def login(self, username: str, password: str) -> User:
        self.login_calls.append((username, password))
        if self.gate is not None:
            await self.gate.wait()
        if isinstance(self.login_result, Exception):
            raise self.login_result
        return self.login_result

    async def get_vehicles(self) -> list[Vehicle]:
        if isinstance(self.vehicles_result, Exception):
            raise self.vehicles_result
        return self.vehicles_result

    def logout(self) -> None:
        self.logged_out = True


def _record(model: ObservableModel, *fields: str) -> list[tuple[str, Any, Any]]:
    changes: list[tuple[str, Any, Any]] = []
    model.subscribe(lambda name, old, new: changes.append((name, old, new)), *fields)
    return changes


# ------------------------------------------------------------------
# ObservableModel
# ------------------------------------------------------------------


class _Counter(ObservableModel):
    count: int = 0
    label: str = ""


class TestObservableModel:
    def test_notifies_only_on_change(self) -> None:
        counter = _Counter()
        changes = _record(counter)

        counter.count = 1
        counter.count = 1
        counter.label = "x"

        assert changes == [("count", 0, 1), ("label", "", "x")]

    def test_field_filter_and_unsubscribe(self) -> None:
        counter = _Counter()
        changes: list[str] = []
        unsubscribe = counter.subscribe(lambda name, _old, _new: changes.append(name), "label")

        counter.count = 5
        counter.label = "a"
        unsubscribe()
        counter.label = "b"

        assert changes == ["label"]

    def test_assignment_is_validated(self) -> None:
        counter = _Counter()
        counter.count = "3"  # type: ignore[assignment]
        assert counter.count == 3

    def test_unknown_field_subscription_rejected(self) -> None:
        with pytest.raises(ValueError, match="nope"):
            _Counter().subscribe(lambda *_: None, "nope")

    def test_failing_listener_does_not_block_others(self) -> None:
        counter = _Counter()
        seen: list[int] = []

        def _boom(*_args: Any) -> None:
            raise RuntimeError("listener bug")

        counter.subscribe(_boom)
        counter.subscribe(lambda _name, _old, new: seen.append(new), "count")
        counter.count = 2

        assert seen == [2]


# ------------------------------------------------------------------
# LoginViewModel
# ------------------------------------------------------------------


class TestLoginViewModel:
    @pytest.mark.asyncio
    async def test_successful_submit(self) -> None:
        client = _StubClient()
        vm = LoginViewModel(client, username="driver", password="secret")  # type: ignore[arg-type]
        loading = _record(vm, "is_loading")

        assert await vm.submit() is True

        assert vm.user == _USER
        assert vm.password == ""
        assert vm.error is None
        assert [new for _name, _old, new in loading] == [True, False]
        assert client.login_calls == [("driver", "secret")]

    @pytest.mark.asyncio
    async def test_blank_fields_set_error_without_calling_client(self) -> None:
        client = _StubClient()
        vm = LoginViewModel(client, username=" ", password="secret")  # type: ignore[arg-type]

        assert await vm.submit() is False

        assert vm.error == "Enter a username and password"
        assert client.login_calls == []
        assert not vm.can_submit

    @pytest.mark.asyncio
    async def test_failure_surfaces_message_and_keeps_password(self) -> None:
        client = _StubClient()
        client.login_result = FuelTrackAuthenticationError("Login failed: invalid username or password")
        vm = LoginViewModel(client, username="driver", password="wrong")  # type: ignore[arg-type]

        assert await vm.submit() is False

        assert vm.error == "Login failed: invalid username or password"
        assert vm.user is None
        assert vm.password == "wrong"
        assert vm.is_loading is False

    @pytest.mark.asyncio
    async def test_new_attempt_clears_previous_error(self) -> None:
        client = _StubClient()
        client.login_result = FuelTrackTransportError("Request to login failed: refused")
        vm = LoginViewModel(client, username="driver", password="secret")  # type: ignore[arg-type]
        await vm.submit()
        assert vm.error is not None

        client.login_result = _USER
        await vm.submit()

        assert vm.error is None
        assert vm.user == _USER

    @pytest.mark.asyncio
    async def test_submit_while_loading_is_ignored(self) -> None:
        client = _StubClient()
        client.gate = asyncio.Event()
        vm = LoginViewModel(client, username="driver", password="secret")  # type: ignore[arg-type]

        first = asyncio.create_task(vm.submit())
        await asyncio.sleep(0)
        assert vm.is_loading is True
        assert vm.can_submit is False
        assert await vm.submit() is False

        client.gate.set()
        assert await first is True
        assert len(client.login_calls) == 1

    @pytest.mark.asyncio
    async def test_logout(self) -> None:
        client = _StubClient()
        vm = LoginViewModel(client, username="driver", password="secret")  # type: ignore[arg-type]
        await vm.submit()

        vm.logout()

        assert vm.user is None
        assert client.logged_out is True


# ------------------------------------------------------------------
# VehicleListViewModel
# ------------------------------------------------------------------


def _vehicles() -> list[Vehicle]:
    return [
        Vehicle(id="1", vin="VIN1", make="Honda", model="Civic", year=2019, current_mileage=45210),
        Vehicle(id="2", vin="VIN2", make="Ford", model="F-150", year=2021),
    ]


class TestVehicleListViewModel:
    @pytest.mark.asyncio
    async def test_load_populates_vehicles(self) -> None:
        client = _StubClient()
        client.vehicles_result = _vehicles()
        vm = VehicleListViewModel(client)  # type: ignore[arg-type]
        changes = _record(vm, "vehicles")

        assert await vm.load() is True

        assert [v.vin for v in vm.vehicles] == ["VIN1", "VIN2"]
        assert vm.has_loaded is True
        assert vm.is_loading is False
        assert len(changes) == 1

    @pytest.mark.asyncio
    async def test_load_failure_keeps_previous_list(self) -> None:
        client = _StubClient()
        client.vehicles_result = _vehicles()
        vm = VehicleListViewModel(client)  # type: ignore[arg-type]
        await vm.load()

        client.vehicles_result = FuelTrackTransportError("HTTP 500 from getVehicles: backend exploded")
        assert await vm.load() is False

        assert vm.error == "HTTP 500 from getVehicles: backend exploded"
        assert len(vm.vehicles) == 2

    @pytest.mark.asyncio
    async def test_select_by_index_and_out_of_range(self) -> None:
        client = _StubClient()
        client.vehicles_result = _vehicles()
        vm = VehicleListViewModel(client)  # type: ignore[arg-type]
        await vm.load()

        assert vm.select(5) is None
        assert vm.error == "No vehicle #6"
        assert vm.selected is None

        picked = vm.select(1)
        assert picked is not None and picked.vin == "VIN2"
        assert vm.selected == picked
        assert vm.error is None

    def test_clear(self) -> None:
        vm = VehicleListViewModel(_StubClient(), vehicles=_vehicles(), has_loaded=True)  # type: ignore[arg-type]
        vm.select(0)

        vm.clear()

        assert vm.vehicles == []
        assert vm.selected is None
        assert vm.has_loaded is False


# ------------------------------------------------------------------
# VehicleDetailViewModel
# ------------------------------------------------------------------


class TestVehicleDetailViewModel:
    def test_empty(self) -> None:
        vm = VehicleDetailViewModel()
        assert vm.title == ""
        assert vm.mileage_text == "Unknown"
        assert vm.fuel_ups == []
        assert vm.last_fuel_up is None
        assert vm.total_spent == 0

    def test_derived_values(self) -> None:
        older = FuelUp(id="a", date=datetime(2024, 4, 20, tzinfo=UTC), gallons=9.8, price_per_gallon=3.459)
        newer = FuelUp(id="b", date=datetime(2024, 5, 1, tzinfo=UTC), gallons=10.2, total_cost=35.7)
        undated = FuelUp(id="c", gallons=1.0)
        vehicle = Vehicle(
            id="1",
            make="Honda",
            model="Civic",
            year=2019,
            current_mileage=45210.4,
            fuel_ups=[older, undated, newer],
        )
        vm = VehicleDetailViewModel()
        changes = _record(vm)

        vm.show(vehicle)

        assert len(changes) == 1
        assert vm.title == "2019 Honda Civic"
        assert vm.mileage_text == "45,210 mi"
        assert [f.id for f in vm.fuel_ups] == ["b", "a", "c"]
        assert vm.last_fuel_up is not None and vm.last_fuel_up.id == "b"
        assert vm.total_spent == pytest.approx(35.7 + 33.9)
        assert vm.total_gallons == pytest.approx(21.0)
