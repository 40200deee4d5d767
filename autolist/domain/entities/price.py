"""Price entity."""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class Price:
    """Price of a vehicle, keyed by the vehicle identifier."""

    currency: str
    amount: Decimal
    id: Optional[int] = None
