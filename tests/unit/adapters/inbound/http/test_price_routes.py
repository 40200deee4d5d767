"""Unit tests for pricing service HTTP routes."""

from decimal import Decimal

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient

from autolist.adapters.inbound.http import price_routes
from autolist.adapters.inbound.http.price_routes import router
from autolist.adapters.outbound.price.price_repository import InMemoryPriceRepository
from autolist.application.use_cases.price_service import PriceService
from autolist.infrastructure.config.settings import settings


@pytest.fixture
def service(monkeypatch) -> PriceService:
    """Replace the routes' price service with one over an empty store."""
    service = PriceService(InMemoryPriceRepository())
    monkeypatch.setattr(price_routes, "_price_service", service)
    return service


@pytest.fixture
def client(service):
    """Create test client."""
    app = FastAPI()
    app.include_router(router)
    return TestClient(app)


def test_health_check(client):
    """Test health check endpoint."""
    response = client.get("/health")
    assert response.status_code == status.HTTP_200_OK


def test_create_and_get_price(client):
    """Test that a price created for a vehicle id can be fetched by it."""
    response = client.post(
        "/services/prices", json={"id": 1, "currency": "USD", "amount": "22.50"}
    )

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["id"] == 1

    response = client.get("/services/prices/1")
    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["currency"] == "USD"
    assert Decimal(str(data["amount"])) == Decimal("22.50")


def test_create_price_without_id(client):
    """Test that the store assigns an id when none is given."""
    response = client.post("/services/prices", json={"currency": "USD", "amount": 10})

    assert response.status_code == status.HTTP_201_CREATED
    assert response.json()["id"] == 1


def test_create_price_rejects_negative_amount(client):
    """Test that amounts are validated."""
    response = client.post("/services/prices", json={"currency": "USD", "amount": "-1"})

    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_get_price_not_found(client):
    """Test that a missing price returns 404."""
    response = client.get("/services/prices/3")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json()["detail"] == "Price 3 not found"


def test_list_prices(client):
    """Test that all prices are listed."""
    client.post("/services/prices", json={"id": 1, "currency": "USD", "amount": "1.00"})
    client.post("/services/prices", json={"id": 2, "currency": "USD", "amount": "2.00"})

    response = client.get("/services/prices")

    assert response.status_code == status.HTTP_200_OK
    assert sorted(price["id"] for price in response.json()) == [1, 2]


def test_update_price(client):
    """Test that PUT overwrites an existing price; the path id wins."""
    client.post("/services/prices", json={"id": 1, "currency": "USD", "amount": "1.00"})

    response = client.put(
        "/services/prices/1", json={"id": 9, "currency": "EUR", "amount": "3.00"}
    )

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["id"] == 1
    assert data["currency"] == "EUR"


def test_update_missing_price(client):
    """Test that updating a missing price returns 404."""
    response = client.put("/services/prices/1", json={"currency": "EUR", "amount": "3.00"})

    assert response.status_code == status.HTTP_404_NOT_FOUND


def test_delete_price(client):
    """Test that DELETE returns 204 and a second delete returns 404."""
    client.post("/services/prices", json={"id": 1, "currency": "USD", "amount": "1.00"})

    assert client.delete("/services/prices/1").status_code == status.HTTP_204_NO_CONTENT
    assert client.delete("/services/prices/1").status_code == status.HTTP_404_NOT_FOUND


def test_seed_prices(service, monkeypatch):
    """Test that seeding fills the store with the configured number of prices."""
    monkeypatch.setattr(settings, "seed_prices", True)
    monkeypatch.setattr(settings, "seed_price_count", 10)

    price_routes.seed_prices()

    assert len(service.list()) == 10


def test_seed_prices_disabled(service, monkeypatch):
    """Test that seeding is skipped when disabled."""
    monkeypatch.setattr(settings, "seed_prices", False)

    price_routes.seed_prices()

    assert service.list() == []
