"""
Cars API Backend — SQLAlchemy Car Repository
=============================================

What:  CarRepository backed by the `cars` table.
Why:   Default provider for production deployments (PostgreSQL via asyncpg).
How:   Opens one AsyncSession per lookup from an async_sessionmaker, runs a
       primary-key SELECT, and converts the row into an immutable Car.
Who:   Built once by create_app() and handed to CarService.

Query plan:
    SELECT cars.name, cars.type FROM cars WHERE cars.name = :name
    → PRIMARY KEY index → O(log n) lookup

Error Handling:
    Any SQLAlchemyError (connection refused, missing table, timeout) is
    logged with its details and re-raised as DatabaseError. The global
    handler turns that into a generic 500; the client never sees SQL.
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from cars_api.exceptions import DatabaseError
from cars_api.models.car import CarRecord
from cars_api.repositories.base import CarRepository
from cars_api.schemas.car import Car

logger = logging.getLogger(__name__)


class SqlAlchemyCarRepository(CarRepository):
    """
    Looks cars up in the `cars` table.

    The repository owns session lifetime: a session is opened and closed
    inside each find_by_name() call, so the repository itself holds no
    per-request state and is safe to share across concurrent requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def find_by_name(self, name: str) -> Optional[Car]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(
                    select(CarRecord).where(CarRecord.name == name)
                )
                record = result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Database error looking up car %r: %s", name, str(e))
            raise DatabaseError(
                message="Could not look up the car. Please try again.",
                context={"car_name": name, "original_error": type(e).__name__},
            ) from e

        if record is None:
            return None
        return Car.model_validate(record)
