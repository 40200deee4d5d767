"""Price repository adapters."""

from autolist.adapters.outbound.price.price_repository import InMemoryPriceRepository
from autolist.adapters.outbound.price.sql_price_repository import SqlPriceRepository

__all__ = [
    "InMemoryPriceRepository",
    "SqlPriceRepository",
]
