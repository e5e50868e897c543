"""
Cars API Backend — In-Memory Car Repository
============================================

What:  Dict-backed CarRepository.
Why:   Lets the service and the HTTP boundary be exercised end-to-end
       without a database.
"""

from typing import Dict, Iterable, Optional

from cars_api.repositories.base import CarRepository
from cars_api.schemas.car import Car


class InMemoryCarRepository(CarRepository):
    """
    Stores cars keyed by name.

    - Keys are compared exactly (case-sensitive)
    - A later car with the same name replaces an earlier one, so the store
      never holds two cars for one name
    """

    def __init__(self, cars: Iterable[Car] = ()) -> None:
        self._cars: Dict[str, Car] = {car.name: car for car in cars}

    async def find_by_name(self, name: str) -> Optional[Car]:
        return self._cars.get(name)

    def __len__(self) -> int:
        return len(self._cars)
