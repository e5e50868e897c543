# Repositories package init
"""
Cars API Backend — Lookup Providers
====================================

What:  Data-access layer answering one question: "which car has this name?"
Why:   The service depends on the CarRepository interface only, so the
       storage technology can change without touching service or route.

Provider Inventory:
    - CarRepository (abstract): find_by_name(name) -> Car | None
    - SqlAlchemyCarRepository: `cars` table via async SQLAlchemy (default)
    - InMemoryCarRepository: dict keyed by name (tests, database-free runs)
"""

from cars_api.repositories.base import CarRepository
from cars_api.repositories.memory import InMemoryCarRepository
from cars_api.repositories.sql import SqlAlchemyCarRepository

__all__ = ["CarRepository", "InMemoryCarRepository", "SqlAlchemyCarRepository"]
