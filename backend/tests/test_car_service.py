"""
Cars API Backend — Car Service Unit Tests
==========================================

What:  Tests for CarService.get_details() found / not-found classification.
How:   Uses an AsyncMock repository or the in-memory provider (no DB).

What we test:
    ✅ Stored name returns the stored Car unchanged
    ✅ Unknown name raises CarNotFoundError (never returns a placeholder)
    ✅ Repository called exactly once, with the name untouched
    ✅ Repeated lookups give identical results
    ✅ Repository failures propagate as-is
"""

import pytest
from unittest.mock import AsyncMock

from cars_api.exceptions import CarNotFoundError, DatabaseError, NotFoundError
from cars_api.repositories.base import CarRepository
from cars_api.repositories.memory import InMemoryCarRepository
from cars_api.schemas.car import Car
from cars_api.services.car_service import CarService


class TestCarServiceFound:
    """Lookups for names present in the store."""

    @pytest.mark.asyncio
    async def test_get_details_exists_returns_car(self, memory_repository):
        service = CarService(memory_repository)

        car = await service.get_details("prius")

        assert car.name == "prius"
        assert car.type == "hybrid"

    @pytest.mark.asyncio
    async def test_get_details_returns_repository_value_unchanged(self, prius):
        repository = AsyncMock(spec=CarRepository)
        repository.find_by_name.return_value = prius

        car = await CarService(repository).get_details("prius")

        assert car is prius

    @pytest.mark.asyncio
    async def test_get_details_is_idempotent(self, memory_repository):
        service = CarService(memory_repository)

        first = await service.get_details("prius")
        second = await service.get_details("prius")

        assert first == second == Car(name="prius", type="hybrid")


class TestCarServiceNotFound:
    """Lookups for names absent from the store."""

    @pytest.mark.asyncio
    async def test_get_details_empty_store_raises(self):
        service = CarService(InMemoryCarRepository())

        with pytest.raises(CarNotFoundError) as exc_info:
            await service.get_details("nothing")

        assert exc_info.value.name == "nothing"
        assert exc_info.value.context["resource"] == "car"

    @pytest.mark.asyncio
    async def test_not_found_is_a_not_found_error(self, memory_repository):
        """CarNotFoundError can be caught as the generic NotFoundError."""
        with pytest.raises(NotFoundError, match="'civic' was not found"):
            await CarService(memory_repository).get_details("civic")

    @pytest.mark.asyncio
    async def test_lookup_is_case_sensitive(self, memory_repository):
        with pytest.raises(CarNotFoundError):
            await CarService(memory_repository).get_details("Prius")

    @pytest.mark.asyncio
    async def test_repeated_misses_raise_every_time(self):
        service = CarService(InMemoryCarRepository())

        for _ in range(3):
            with pytest.raises(CarNotFoundError):
                await service.get_details("nothing")


class TestCarServiceRepositoryContract:
    """How the service talks to its repository."""

    @pytest.mark.asyncio
    async def test_calls_repository_once_with_name_untouched(self, prius):
        repository = AsyncMock(spec=CarRepository)
        repository.find_by_name.return_value = prius

        await CarService(repository).get_details("  Prius ")

        repository.find_by_name.assert_awaited_once_with("  Prius ")

    @pytest.mark.asyncio
    async def test_calls_repository_once_on_miss(self):
        repository = AsyncMock(spec=CarRepository)
        repository.find_by_name.return_value = None

        with pytest.raises(CarNotFoundError):
            await CarService(repository).get_details("nothing")

        repository.find_by_name.assert_awaited_once_with("nothing")

    @pytest.mark.asyncio
    async def test_repository_failure_propagates(self):
        repository = AsyncMock(spec=CarRepository)
        repository.find_by_name.side_effect = DatabaseError(message="db down")

        with pytest.raises(DatabaseError, match="db down"):
            await CarService(repository).get_details("prius")
