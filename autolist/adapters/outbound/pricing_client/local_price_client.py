"""Price client reading the price store in-process."""

from decimal import Decimal

from autolist.application.errors import PriceClientError
from autolist.application.ports.price_client import PriceClient
from autolist.application.ports.price_repository import PriceRepository


class LocalPriceClient(PriceClient):
    """Price client for running the vehicles service without a pricing service."""

    def __init__(self, repository: PriceRepository) -> None:
        self._repository = repository

    def get_price(self, vehicle_id: int) -> Decimal:
        price = self._repository.find_by_id(vehicle_id)
        if price is None:
            raise PriceClientError(f"No price exists for vehicle {vehicle_id}")
        return price.amount
