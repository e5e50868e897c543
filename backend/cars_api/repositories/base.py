"""
Cars API Backend — Abstract Car Repository Interface
=====================================================

What:  Abstract base class defining the contract for car lookup providers.
Why:   The lookup service must not know whether cars live in PostgreSQL,
       SQLite, or a dict. This is the Strategy design pattern.
How:   Concrete providers inherit from CarRepository and implement find_by_name().
Who:   Called by CarService.get_details(), exactly once per lookup.
"""

from abc import ABC, abstractmethod
from typing import Optional

from cars_api.schemas.car import Car


class CarRepository(ABC):
    """
    Abstract interface for looking up a car by name.

    Contract:
        - find_by_name() returns the single matching Car, or None
        - The name is used exactly as given (no trimming, no case-folding)
        - No ordering, pagination, or multi-result semantics
        - At most one car per name; providers enforce or reflect this
        - Storage failures are raised, never reported as None

    Implementations:
        - SqlAlchemyCarRepository: `cars` table (default)
        - InMemoryCarRepository: dict-backed, for tests
    """

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Car]:
        """
        Look up the car stored under `name`.

        Args:
            name: Opaque, case-sensitive lookup key.

        Returns:
            The matching Car, or None when no car has that name.

        Raises:
            DatabaseError: The backing store could not be queried.
        """
        ...
