"""
Cars API Backend — Car Service (Lookup Service)
================================================

What:  Looks a car up by name and classifies the outcome: found or not found.
Why:   A repository reports absence as None. Callers must not be able to
       mistake that for a real car, so the service turns it into an
       explicit CarNotFoundError.
How:   Calls the injected CarRepository exactly once per lookup.
Who:   Called by GET /cars/{name}; composed with its repository in create_app().

Lookup Flow:
    ┌──────────┐   name    ┌────────────┐  find_by_name  ┌──────────────┐
    │  Route   │──────────▶│ CarService │───────────────▶│ CarRepository│
    └──────────┘           └────────────┘                └──────────────┘
         ▲                       │
         │  Car                  │ None → raise CarNotFoundError
         └───────────────────────┘

Design Decision:
    The service is stateless and has no side effects: no caching, no
    logging, no retry. Repository failures (DatabaseError) propagate
    untouched; the route and global handlers decide what the client sees.
"""

from cars_api.exceptions import CarNotFoundError
from cars_api.repositories.base import CarRepository
from cars_api.schemas.car import Car


class CarService:
    """
    Business logic layer for car lookups.

    Responsibilities:
        - get_details(): Single lookup with not-found signaling
    """

    def __init__(self, repository: CarRepository) -> None:
        self.repository = repository

    async def get_details(self, name: str) -> Car:
        """
        Return the car stored under `name`.

        Args:
            name: Lookup key, passed to the repository as-is.

        Returns:
            The repository's Car, unchanged.

        Raises:
            CarNotFoundError: No car has this name.
            DatabaseError: The repository could not query its store.
        """
        car = await self.repository.find_by_name(name)
        if car is None:
            raise CarNotFoundError(name)
        return car
