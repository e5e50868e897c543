"""
Cars API Backend — Cars Route Handler
======================================

What:  Handles GET /cars/{name}.
Why:   The boundary between HTTP and the lookup service.
How:   Extracts the name path segment, calls CarService.get_details(),
       and maps the outcome to a status code.

Boundary Translation:
    Car returned          → 200 {"name": ..., "type": ...}
    CarNotFoundError      → 204, empty body, no error payload
    anything else         → propagates to the global handlers (500)

    The not-found case is matched right here with try/except rather than
    through a registered exception handler, so the 204 mapping is visible
    next to the route it belongs to.
"""

from fastapi import APIRouter, Depends, Request, Response, status

from cars_api.exceptions import CarNotFoundError
from cars_api.schemas.car import Car, ErrorResponse
from cars_api.services.car_service import CarService

router = APIRouter(tags=["Cars"])


def get_car_service(request: Request) -> CarService:
    """Returns the CarService composed by create_app() at startup."""
    return request.app.state.car_service


@router.get(
    "/cars/{name}",
    response_model=Car,
    responses={
        200: {"description": "Car found", "model": Car},
        204: {"description": "No car with this name (empty body)"},
        500: {"description": "Server error", "model": ErrorResponse},
    },
    summary="Get a car's details by name",
    description=(
        "Returns the car's name and type. The name is matched exactly "
        "(case-sensitive). Unknown names return 204 No Content with an empty body."
    ),
)
async def get_car_details(
    name: str,
    car_service: CarService = Depends(get_car_service),
):
    """
    Look up a single car by name.

    Example:
        GET /cars/prius → 200 {"name": "prius", "type": "hybrid"}
        GET /cars/nothing → 204
    """
    try:
        car = await car_service.get_details(name)
    except CarNotFoundError:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return car
