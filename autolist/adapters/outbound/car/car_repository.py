"""In-memory car repository adapter."""

import copy
from datetime import datetime, timezone
from typing import Optional

from autolist.application.ports.car_repository import CarRepository
from autolist.domain.entities.car import Car


class InMemoryCarRepository(CarRepository):
    """In-memory implementation of car repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[int, Car] = {}
        self._last_id = 0

    def save(self, car: Car) -> Car:
        """
        Insert or update a car.

        Args:
            car: Car to persist

        Returns:
            A copy of the stored car
        """
        stored = copy.deepcopy(car)
        stored.price = None  # Price is never persisted
        now = datetime.now(timezone.utc)
        if stored.id is None:
            self._last_id += 1
            stored.id = self._last_id
        else:
            self._last_id = max(self._last_id, stored.id)
        previous = self._storage.get(stored.id)
        stored.created_at = previous.created_at if previous else (stored.created_at or now)
        stored.modified_at = now
        self._storage[stored.id] = stored
        return copy.deepcopy(stored)

    def find_by_id(self, car_id: int) -> Optional[Car]:
        """
        Get a car by id.

        Args:
            car_id: Car identifier

        Returns:
            A copy of the stored car, or None if not found
        """
        car = self._storage.get(car_id)
        return copy.deepcopy(car) if car else None

    def find_all(self) -> list[Car]:
        """
        List all cars.

        Returns:
            Copies of all stored cars
        """
        return [copy.deepcopy(car) for car in self._storage.values()]

    def delete(self, car: Car) -> None:
        """
        Delete a car.

        Args:
            car: Car to remove
        """
        self._storage.pop(car.id, None)
