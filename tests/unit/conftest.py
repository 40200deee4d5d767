"""Shared fixtures for unit tests."""

from decimal import Decimal
from typing import Callable, Optional

import pytest

from autolist.domain.entities.car import Car, Condition, Details, Location, Manufacturer
from tests.unit.fakes import FakeMapsClient, FakePriceClient


@pytest.fixture
def make_car() -> Callable[..., Car]:
    """Factory for Car entities."""

    def _make_car(
        car_id: Optional[int] = None,
        lat: float = 40.0,
        lon: float = -74.0,
        model: str = "Impala",
        condition: Condition = Condition.USED,
    ) -> Car:
        return Car(
            id=car_id,
            condition=condition,
            details=Details(
                body="sedan",
                model=model,
                manufacturer=Manufacturer(code=101, name="Chevrolet"),
                model_year=2018,
                number_of_doors=4,
                fuel_type="Gasoline",
                engine="3.6L V6",
                mileage=32280,
                production_year=2018,
                external_color="white",
            ),
            location=Location(lat=lat, lon=lon),
        )

    return _make_car


@pytest.fixture
def price_client() -> FakePriceClient:
    """Price client knowing prices for vehicle ids 1 to 3."""
    return FakePriceClient(
        {1: Decimal("22.50"), 2: Decimal("18999.99"), 3: Decimal("31000.00")}
    )


@pytest.fixture
def maps_client() -> FakeMapsClient:
    """Maps client returning a fixed New York address."""
    return FakeMapsClient()
