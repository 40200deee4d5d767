"""Dependency injection factory functions."""

from autolist.adapters.outbound.car import InMemoryCarRepository, SqlCarRepository
from autolist.adapters.outbound.maps import HttpMapsClient, MockMapsClient
from autolist.adapters.outbound.price import InMemoryPriceRepository, SqlPriceRepository
from autolist.adapters.outbound.pricing_client import HttpPriceClient, LocalPriceClient
from autolist.application.ports.car_repository import CarRepository
from autolist.application.ports.maps_client import MapsClient
from autolist.application.ports.price_client import PriceClient
from autolist.application.ports.price_repository import PriceRepository
from autolist.application.use_cases.car_service import CarService
from autolist.application.use_cases.price_service import PriceService
from autolist.infrastructure.config.settings import settings
from autolist.infrastructure.logging.logger import log_event


def create_car_repository() -> CarRepository:
    """
    Factory function to create car repository.

    Returns:
        CarRepository instance
    """
    if settings.car_repository == "sql":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when CAR_REPOSITORY=sql")
        return SqlCarRepository()
    else:
        return InMemoryCarRepository()


def create_price_repository() -> PriceRepository:
    """
    Factory function to create price repository.

    Returns:
        PriceRepository instance
    """
    if settings.price_repository == "sql":
        if not settings.database_url:
            raise ValueError("DATABASE_URL is required when PRICE_REPOSITORY=sql")
        return SqlPriceRepository()
    else:
        return InMemoryPriceRepository()


def create_price_service() -> PriceService:
    """
    Factory function to create price service.

    Returns:
        PriceService instance
    """
    return PriceService(create_price_repository(), logger=log_event)


def seed_price_store(price_service: PriceService) -> None:
    """Seed the price store when SEED_PRICES is enabled."""
    if settings.seed_prices:
        price_service.seed(settings.seed_price_count)


def create_price_client() -> PriceClient:
    """
    Factory function to create price client.

    The local client reads a price store in-process, seeded like the pricing
    service would be, so the vehicles service can run on its own.

    Returns:
        PriceClient instance
    """
    if settings.price_client == "local":
        repository = create_price_repository()
        seed_price_store(PriceService(repository, logger=log_event))
        return LocalPriceClient(repository)
    else:
        return HttpPriceClient()


def create_maps_client() -> MapsClient:
    """
    Factory function to create maps client.

    Returns:
        MapsClient instance
    """
    if settings.maps_client == "http":
        return HttpMapsClient()
    else:
        return MockMapsClient()


def create_car_service() -> CarService:
    """
    Factory function to create CarService with dependencies.

    Returns:
        CarService instance
    """
    return CarService(
        create_car_repository(),
        create_price_client(),
        create_maps_client(),
        logger=log_event,
    )
