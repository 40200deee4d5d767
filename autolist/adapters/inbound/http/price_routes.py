"""HTTP routes for the pricing service."""

from fastapi import APIRouter, HTTPException, Response, status

from autolist.application.dtos.price import PriceRequest, PriceResponse
from autolist.application.errors import NotFoundError
from autolist.infrastructure.wiring.dependencies import create_price_service, seed_price_store

router = APIRouter()

# Create use case instance (wired with dependencies)
_price_service = create_price_service()


def seed_prices() -> None:
    """Seed the price store backing these routes (no-op unless SEED_PRICES is set)."""
    seed_price_store(_price_service)


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check() -> dict[str, str]:
    """Health check endpoint for liveness/readiness."""
    return {"status": "ok"}


@router.get("/services/prices", response_model=list[PriceResponse])
def list_prices() -> list[PriceResponse]:
    """List all stored prices."""
    return [PriceResponse.model_validate(price) for price in _price_service.list()]


@router.get("/services/prices/{price_id}", response_model=PriceResponse)
def get_price(price_id: int) -> PriceResponse:
    """Get the price stored for a vehicle id."""
    try:
        price = _price_service.find_by_id(price_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return PriceResponse.model_validate(price)


@router.post(
    "/services/prices", status_code=status.HTTP_201_CREATED, response_model=PriceResponse
)
def create_price(request: PriceRequest) -> PriceResponse:
    """
    Store a new price.

    The body may carry the id of the vehicle the price belongs to.
    """
    return PriceResponse.model_validate(_price_service.create(request.to_entity()))


@router.put("/services/prices/{price_id}", response_model=PriceResponse)
def update_price(price_id: int, request: PriceRequest) -> PriceResponse:
    """Overwrite currency and amount of an existing price."""
    try:
        price = _price_service.update(price_id, request.to_entity(price_id=price_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return PriceResponse.model_validate(price)


@router.delete("/services/prices/{price_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_price(price_id: int) -> Response:
    """Delete a stored price."""
    try:
        _price_service.delete(price_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
