"""HTTP routes for the vehicles service."""

from fastapi import APIRouter, HTTPException, Response, status

from autolist.application.dtos.car import CarRequest, CarResponse
from autolist.application.errors import NotFoundError
from autolist.infrastructure.logging.logger import log_event
from autolist.infrastructure.wiring.dependencies import create_car_service

router = APIRouter()

# Create use case instance (wired with dependencies)
_car_service = create_car_service()


@router.get("/health", status_code=status.HTTP_200_OK)
def health_check() -> dict[str, str]:
    """
    Health check endpoint for liveness/readiness.

    Returns:
        Health status
    """
    return {"status": "ok"}


@router.get("/cars", response_model=list[CarResponse])
def list_cars() -> list[CarResponse]:
    """
    List all vehicles with their current location and price.

    Any collaborator failure fails the whole listing.
    """
    return [CarResponse.model_validate(car) for car in _car_service.list()]


@router.get("/cars/{car_id}", response_model=CarResponse)
def get_car(car_id: int) -> CarResponse:
    """
    Get a vehicle by id, with its current location and price.

    Raises:
        HTTPException: 404 when the vehicle does not exist
    """
    try:
        car = _car_service.find_by_id(car_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return CarResponse.model_validate(car)


@router.post("/cars", status_code=status.HTTP_201_CREATED, response_model=CarResponse)
def create_car(request: CarRequest) -> CarResponse:
    """
    Create a new vehicle.

    Args:
        request: Vehicle condition, details and location

    Returns:
        The stored vehicle (not enriched)
    """
    car = _car_service.save(request.to_entity())
    log_event("http", "create_car", car_id=car.id)
    return CarResponse.model_validate(car)


@router.put("/cars/{car_id}", response_model=CarResponse)
def update_car(car_id: int, request: CarRequest) -> CarResponse:
    """
    Replace the details and location of an existing vehicle.

    Raises:
        HTTPException: 404 when the vehicle does not exist
    """
    try:
        car = _car_service.save(request.to_entity(car_id=car_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return CarResponse.model_validate(car)


@router.delete("/cars/{car_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_car(car_id: int) -> Response:
    """
    Delete a vehicle.

    Raises:
        HTTPException: 404 when the vehicle does not exist
    """
    try:
        _car_service.delete(car_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    return Response(status_code=status.HTTP_204_NO_CONTENT)
