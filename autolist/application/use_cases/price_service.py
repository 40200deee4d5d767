"""Price service use case."""

import random
from decimal import Decimal
from typing import Any, Callable, Optional

from autolist.application.errors import PriceNotFoundError
from autolist.application.ports.price_repository import PriceRepository
from autolist.domain.entities.price import Price


class PriceService:
    """Use case for managing stored vehicle prices."""

    DEFAULT_CURRENCY = "USD"
    # Seeded prices fall in [MIN_SEED_AMOUNT, MAX_SEED_AMOUNT)
    MIN_SEED_AMOUNT = Decimal("1000")
    MAX_SEED_AMOUNT = Decimal("50000")

    def __init__(
        self,
        repository: PriceRepository,
        logger: Optional[Callable[..., None]] = None,
    ) -> None:
        """
        Initialize price service.

        Args:
            repository: Price store
            logger: Optional logger function (component, action, **kwargs)
        """
        self._repository = repository
        self._logger = logger

    def _log(self, action: str, **kwargs: Any) -> None:
        if self._logger:
            self._logger("price_service", action, **kwargs)

    def seed(self, count: int, rng: Optional[random.Random] = None) -> list[Price]:
        """
        Seed random prices for vehicle ids 1..count when the store is empty.

        Args:
            count: Number of prices to create
            rng: Random source (defaults to a new unseeded Random)

        Returns:
            The created prices; empty if the store already held prices
        """
        if self._repository.find_all():
            return []

        rng = rng or random.Random()
        low = int(self.MIN_SEED_AMOUNT * 100)
        high = int(self.MAX_SEED_AMOUNT * 100)
        seeded = [
            self._repository.save(
                Price(
                    id=vehicle_id,
                    currency=self.DEFAULT_CURRENCY,
                    amount=Decimal(rng.randrange(low, high)).scaleb(-2),
                )
            )
            for vehicle_id in range(1, count + 1)
        ]
        self._log("seed", count=len(seeded))
        return seeded

    def list(self) -> list[Price]:
        """List all stored prices."""
        return self._repository.find_all()

    def find_by_id(self, price_id: int) -> Price:
        """
        Get a price by id.

        Raises:
            PriceNotFoundError: If no price has that id
        """
        price = self._repository.find_by_id(price_id)
        if price is None:
            raise PriceNotFoundError(price_id)
        return price

    def create(self, price: Price) -> Price:
        """
        Store a new price.

        A price without id gets a new one; a price with id is stored under it,
        which is how prices are keyed to vehicle ids.
        """
        saved = self._repository.save(price)
        self._log("create", price_id=saved.id)
        return saved

    def update(self, price_id: int, price: Price) -> Price:
        """
        Overwrite currency and amount of an existing price.

        Raises:
            PriceNotFoundError: If no price has that id
        """
        existing = self.find_by_id(price_id)
        existing.currency = price.currency
        existing.amount = price.amount
        saved = self._repository.save(existing)
        self._log("update", price_id=saved.id)
        return saved

    def delete(self, price_id: int) -> None:
        """
        Delete a price by id.

        Raises:
            PriceNotFoundError: If no price has that id
        """
        existing = self.find_by_id(price_id)
        self._repository.delete(existing)
        self._log("delete", price_id=price_id)
