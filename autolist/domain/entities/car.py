"""Car entity and its embedded value objects."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional


class Condition(str, Enum):
    """Vehicle condition."""

    USED = "USED"
    NEW = "NEW"


@dataclass
class Manufacturer:
    """Vehicle manufacturer."""

    code: int
    name: str


@dataclass
class Details:
    """Descriptive details of a vehicle."""

    body: str
    model: str
    manufacturer: Manufacturer
    model_year: int
    number_of_doors: Optional[int] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None


@dataclass
class Location:
    """
    Vehicle location.

    lat/lon are the source of truth; address, city, state and zip are derived
    from them by the maps client and only populated after enrichment.
    """

    lat: float
    lon: float
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None

    def copy_address_from(self, other: "Location") -> None:
        """Overwrite address fields with those of another location, keeping coordinates."""
        self.address = other.address
        self.city = other.city
        self.state = other.state
        self.zip = other.zip


@dataclass
class Car:
    """Car entity."""

    details: Details
    location: Location
    id: Optional[int] = None
    condition: Condition = Condition.USED
    # Transient: never persisted, refreshed from the price client on every read
    price: Optional[Decimal] = field(default=None, compare=False)
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
