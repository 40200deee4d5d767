"""Price client port interface."""

from abc import ABC, abstractmethod
from decimal import Decimal


class PriceClient(ABC):
    """Port interface for the pricing collaborator."""

    @abstractmethod
    def get_price(self, vehicle_id: int) -> Decimal:
        """
        Get the current price of a vehicle.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            Current price

        Raises:
            PriceClientError: If no price exists or the call fails
        """
        pass
