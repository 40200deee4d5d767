"""HTTP maps client adapter."""

from typing import Optional

import requests

from autolist.application.errors import MapsClientError
from autolist.application.ports.maps_client import MapsClient
from autolist.domain.entities.car import Location
from autolist.infrastructure.config.settings import settings
from autolist.infrastructure.logging.logger import logger


class HttpMapsClient(MapsClient):
    """Maps client calling the maps service over HTTP."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout_seconds: Optional[int] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """
        Initialize HTTP maps client.

        Args:
            base_url: Maps service URL (defaults to settings.maps_service_url)
            timeout_seconds: Request timeout (defaults to settings.http_timeout_seconds)
            session: Optional requests session
        """
        self._base_url = (base_url or settings.maps_service_url).rstrip("/")
        self._timeout = timeout_seconds or settings.http_timeout_seconds
        self._session = session or requests.Session()

    def get_address(self, location: Location) -> Location:
        """
        Resolve the address of a location through the maps service.

        Args:
            location: Location with coordinates set

        Returns:
            New Location with the same coordinates and the resolved address fields

        Raises:
            MapsClientError: If the call fails or the payload is malformed
        """
        try:
            response = self._session.get(
                f"{self._base_url}/maps",
                params={"lat": location.lat, "lon": location.lon},
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(
                f"Maps service failed for lat={location.lat} lon={location.lon}: {str(e)}"
            )
            raise MapsClientError(f"Maps service call failed: {str(e)}") from e

        if not isinstance(payload, dict):
            raise MapsClientError("Malformed address payload from maps service")

        return Location(
            lat=location.lat,
            lon=location.lon,
            address=payload.get("address"),
            city=payload.get("city"),
            state=payload.get("state"),
            zip=payload.get("zip"),
        )
