"""Car DTOs."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from autolist.application.dtos.base import DTO
from autolist.domain.entities.car import Car, Condition, Details, Location, Manufacturer


class ManufacturerDTO(DTO):
    """Manufacturer DTO."""

    code: int
    name: str = Field(min_length=1)


class DetailsDTO(DTO):
    """Car details DTO."""

    body: str = Field(min_length=1)
    model: str = Field(min_length=1)
    manufacturer: ManufacturerDTO
    model_year: int
    number_of_doors: Optional[int] = None
    fuel_type: Optional[str] = None
    engine: Optional[str] = None
    mileage: Optional[int] = None
    production_year: Optional[int] = None
    external_color: Optional[str] = None

    model_config = ConfigDict(protected_namespaces=())

    def to_entity(self) -> Details:
        """Convert to domain value object."""
        return Details(
            body=self.body,
            model=self.model,
            manufacturer=Manufacturer(code=self.manufacturer.code, name=self.manufacturer.name),
            model_year=self.model_year,
            number_of_doors=self.number_of_doors,
            fuel_type=self.fuel_type,
            engine=self.engine,
            mileage=self.mileage,
            production_year=self.production_year,
            external_color=self.external_color,
        )


class LocationDTO(DTO):
    """Location DTO."""

    lat: float = Field(ge=-90, le=90)
    lon: float = Field(ge=-180, le=180)
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zip: Optional[str] = None

    def to_entity(self) -> Location:
        """Convert to domain value object."""
        return Location(
            lat=self.lat,
            lon=self.lon,
            address=self.address,
            city=self.city,
            state=self.state,
            zip=self.zip,
        )


class CarRequest(DTO):
    """Car create/update request DTO."""

    condition: Condition = Condition.USED
    details: DetailsDTO
    location: LocationDTO

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "condition": "USED",
                "details": {
                    "body": "sedan",
                    "model": "Impala",
                    "manufacturer": {"code": 101, "name": "Chevrolet"},
                    "number_of_doors": 4,
                    "fuel_type": "Gasoline",
                    "engine": "3.6L V6",
                    "mileage": 32280,
                    "model_year": 2018,
                    "production_year": 2018,
                    "external_color": "white",
                },
                "location": {"lat": 40.73061, "lon": -73.935242},
            }
        }
    )

    def to_entity(self, car_id: Optional[int] = None) -> Car:
        """
        Convert to a Car entity.

        Args:
            car_id: Identifier of the car to update, or None for a new car

        Returns:
            Car entity
        """
        return Car(
            id=car_id,
            condition=self.condition,
            details=self.details.to_entity(),
            location=self.location.to_entity(),
        )


class CarResponse(DTO):
    """Car response DTO."""

    id: int
    condition: Condition
    details: DetailsDTO
    location: LocationDTO
    price: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    modified_at: Optional[datetime] = None
