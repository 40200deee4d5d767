"""Maps client adapters."""

from autolist.adapters.outbound.maps.http_maps_client import HttpMapsClient
from autolist.adapters.outbound.maps.mock_maps_client import MockMapsClient

__all__ = [
    "HttpMapsClient",
    "MockMapsClient",
]
