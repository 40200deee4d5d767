"""Car repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from autolist.domain.entities.car import Car


class CarRepository(ABC):
    """Port interface for the vehicle store."""

    @abstractmethod
    def save(self, car: Car) -> Car:
        """
        Insert or update a car.

        Args:
            car: Car to persist; a car without id is inserted and gets a new id

        Returns:
            The persisted car
        """
        pass

    @abstractmethod
    def find_by_id(self, car_id: int) -> Optional[Car]:
        """
        Get a car by id.

        Args:
            car_id: Car identifier

        Returns:
            Car, or None if not found
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Car]:
        """
        List all cars.

        Returns:
            List of all stored cars, order unspecified
        """
        pass

    @abstractmethod
    def delete(self, car: Car) -> None:
        """
        Delete a car.

        Args:
            car: Stored car to remove
        """
        pass
