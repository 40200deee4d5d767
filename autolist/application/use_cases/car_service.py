"""Car service use case."""

import logging
from typing import Any, Callable, Optional

from autolist.application.errors import CarNotFoundError
from autolist.application.ports.car_repository import CarRepository
from autolist.application.ports.maps_client import MapsClient
from autolist.application.ports.price_client import PriceClient
from autolist.domain.entities.car import Car


class CarService:
    """
    Create, read, update and delete vehicles.

    Reads gather the related location and price data from the maps and price
    collaborators. Writes go straight to the repository and are not enriched.
    """

    def __init__(
        self,
        repository: CarRepository,
        price_client: PriceClient,
        maps_client: MapsClient,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize car service.

        Args:
            repository: Vehicle store
            price_client: Collaborator providing vehicle prices
            maps_client: Collaborator resolving addresses from coordinates
            logger: Optional logger function (component, action, **kwargs)
        """
        self._repository = repository
        self._price_client = price_client
        self._maps_client = maps_client
        self._logger = logger

    def _log(self, action: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger("car_service", action, **kwargs)

    def list(self) -> list[Car]:
        """
        Gather a list of all vehicles.

        Returns:
            All stored cars, each enriched with location and price
        """
        cars = [self._enrich(car) for car in self._repository.find_all()]
        self._log("list", count=len(cars))
        return cars

    def find_by_id(self, car_id: int) -> Car:
        """
        Get car information by id.

        Args:
            car_id: Car identifier

        Returns:
            The car, including location and price

        Raises:
            CarNotFoundError: If no car has that id
        """
        car = self._repository.find_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        return self._enrich(car)

    def save(self, car: Car) -> Car:
        """
        Create or update a vehicle, based on prior existence of the car.

        Args:
            car: New car (id is None) or an update of an existing one

        Returns:
            The persisted car

        Raises:
            CarNotFoundError: If car has an id that does not exist
        """
        if car.id is None:
            saved = self._repository.save(car)
            self._log("create", car_id=saved.id)
            return saved

        existing = self._repository.find_by_id(car.id)
        if existing is None:
            raise CarNotFoundError(car.id)
        existing.details = car.details
        existing.location = car.location
        saved = self._repository.save(existing)
        self._log("update", car_id=saved.id)
        return saved

    def delete(self, car_id: int) -> None:
        """
        Delete a car by id.

        Args:
            car_id: Car identifier

        Raises:
            CarNotFoundError: If no car has that id
        """
        car = self._repository.find_by_id(car_id)
        if car is None:
            raise CarNotFoundError(car_id)
        self._repository.delete(car)
        self._log("delete", car_id=car_id)

    def _enrich(self, car: Car) -> Car:
        """Fill in address fields and the current price; coordinates stay as stored."""
        address = self._maps_client.get_address(car.location)
        car.location.copy_address_from(address)
        car.price = self._price_client.get_price(car.id)
        self._log(
            "enrich",
            level=logging.DEBUG,
            car_id=car.id,
            price=str(car.price),
            city=car.location.city,
        )
        return car
