"""Price client adapters."""

from autolist.adapters.outbound.pricing_client.http_price_client import HttpPriceClient
from autolist.adapters.outbound.pricing_client.local_price_client import LocalPriceClient

__all__ = [
    "HttpPriceClient",
    "LocalPriceClient",
]
