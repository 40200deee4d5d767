"""In-memory price repository adapter."""

import copy
from typing import Optional

from autolist.application.ports.price_repository import PriceRepository
from autolist.domain.entities.price import Price


class InMemoryPriceRepository(PriceRepository):
    """In-memory implementation of price repository."""

    def __init__(self) -> None:
        """Initialize in-memory repository."""
        self._storage: dict[int, Price] = {}
        self._last_id = 0

    def save(self, price: Price) -> Price:
        """
        Insert or update a price.

        Args:
            price: Price to persist

        Returns:
            A copy of the stored price
        """
        stored = copy.deepcopy(price)
        if stored.id is None:
            self._last_id += 1
            stored.id = self._last_id
        else:
            self._last_id = max(self._last_id, stored.id)
        self._storage[stored.id] = stored
        return copy.deepcopy(stored)

    def find_by_id(self, price_id: int) -> Optional[Price]:
        """Get a copy of a stored price, or None if not found."""
        price = self._storage.get(price_id)
        return copy.deepcopy(price) if price else None

    def find_all(self) -> list[Price]:
        """List copies of all stored prices."""
        return [copy.deepcopy(price) for price in self._storage.values()]

    def delete(self, price: Price) -> None:
        """Delete a price."""
        self._storage.pop(price.id, None)
