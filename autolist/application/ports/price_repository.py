"""Price repository port."""

from abc import ABC, abstractmethod
from typing import Optional

from autolist.domain.entities.price import Price


class PriceRepository(ABC):
    """Port interface for the price store."""

    @abstractmethod
    def save(self, price: Price) -> Price:
        """
        Insert or update a price.

        Args:
            price: Price to persist; a price without id is inserted and gets a new id

        Returns:
            The persisted price
        """
        pass

    @abstractmethod
    def find_by_id(self, price_id: int) -> Optional[Price]:
        """
        Get a price by id.

        Args:
            price_id: Price identifier (the vehicle id it belongs to)

        Returns:
            Price, or None if not found
        """
        pass

    @abstractmethod
    def find_all(self) -> list[Price]:
        """
        List all prices.

        Returns:
            List of all stored prices, order unspecified
        """
        pass

    @abstractmethod
    def delete(self, price: Price) -> None:
        """
        Delete a price.

        Args:
            price: Stored price to remove
        """
        pass
