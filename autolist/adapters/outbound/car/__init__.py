"""Car repository adapters."""

from autolist.adapters.outbound.car.car_repository import InMemoryCarRepository
from autolist.adapters.outbound.car.sql_car_repository import SqlCarRepository

__all__ = [
    "InMemoryCarRepository",
    "SqlCarRepository",
]
