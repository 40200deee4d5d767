"""Price DTOs."""

from decimal import Decimal
from typing import Optional

from pydantic import ConfigDict, Field

from autolist.application.dtos.base import DTO
from autolist.domain.entities.price import Price


class PriceRequest(DTO):
    """Price create/update request DTO."""

    id: Optional[int] = None
    currency: str = Field(min_length=3, max_length=3)
    amount: Decimal = Field(ge=0)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "currency": "USD",
                "amount": "22.50",
            }
        }
    )

    def to_entity(self, price_id: Optional[int] = None) -> Price:
        """Convert to a Price entity, preferring an explicit id over the body's."""
        return Price(
            id=price_id if price_id is not None else self.id,
            currency=self.currency,
            amount=self.amount,
        )


class PriceResponse(DTO):
    """Price response DTO."""

    id: int
    currency: str
    amount: Decimal
