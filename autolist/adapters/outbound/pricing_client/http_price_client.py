"""HTTP price client adapter."""

from decimal import Decimal, InvalidOperation
from typing import Optional

import requests

from autolist.application.errors import PriceClientError
from autolist.application.ports.price_client import PriceClient
from autolist.infrastructure.config.settings import settings
from autolist.infrastructure.logging.logger import logger


class HttpPriceClient(PriceClient):
    """Price client calling the pricing service over HTTP."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize HTTP price client.

        Args:
            base_url: Pricing service URL (defaults to settings.pricing_service_url)
            timeout_seconds: Request timeout (defaults to settings.http_timeout_seconds)
            session: Optional requests session
        """
        self._base_url = (base_url or settings.pricing_service_url).rstrip("/")
        self._timeout = timeout_seconds or settings.http_timeout_seconds
        self._session = session or requests.Session()

    def get_price(self, vehicle_id: int) -> Decimal:
        """
        Get the current price of a vehicle from the pricing service.

        Args:
            vehicle_id: Vehicle identifier

        Returns:
            Current price amount

        Raises:
            PriceClientError: If the price is missing or the call fails
        """
        url = f"{self._base_url}/services/prices/{vehicle_id}"
        try:
            response = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as e:
            logger.error(f"Pricing service unreachable for vehicle {vehicle_id}: {str(e)}")
            raise PriceClientError(f"Pricing service call failed: {str(e)}") from e

        if response.status_code == 404:
            raise PriceClientError(f"No price exists for vehicle {vehicle_id}")
        if response.status_code >= 400:
            logger.error(
                f"Pricing service returned {response.status_code} for vehicle {vehicle_id}"
            )
            raise PriceClientError(f"Pricing service returned {response.status_code}")

        try:
            return Decimal(str(response.json()["amount"]))
        except (ValueError, KeyError, TypeError, InvalidOperation) as e:
            raise PriceClientError(f"Malformed price for vehicle {vehicle_id}") from e
