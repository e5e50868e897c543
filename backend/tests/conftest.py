"""
Cars API Backend — Test Configuration (conftest.py)
====================================================

What:  Shared pytest fixtures for the entire test suite.
Why:   Provides reusable test infrastructure (seeded providers, a SQLite
       store, and an HTTP client around a freshly composed app).

Fixture Hierarchy:
    Session-scoped (created once for all tests):
    └── test_database_dir: Temp directory behind DATABASE_URL, removed at the end

    Function-scoped (created fresh for each test):
    ├── prius: The Car("prius", "hybrid") used across scenarios
    ├── memory_repository: InMemoryCarRepository seeded with prius
    ├── sql_session_factory: async_sessionmaker over a temp SQLite file
    │                        with the cars table created
    ├── seed_cars: Inserts Car values into the SQLite store
    └── client_for: Builds an HTTPX AsyncClient around create_app(service)
"""

import os
import shutil
import tempfile

# Override settings for testing BEFORE any cars_api imports
# Why: the engine in cars_api.database is built from settings at import time
_test_dir = tempfile.mkdtemp(prefix="cars_api_test_")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_test_dir}/cars_test.db"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from cars_api.database import Base  # noqa: E402
from cars_api.main import create_app  # noqa: E402
from cars_api.models.car import CarRecord  # noqa: E402
from cars_api.repositories.memory import InMemoryCarRepository  # noqa: E402
from cars_api.schemas.car import Car  # noqa: E402
from cars_api.services.car_service import CarService  # noqa: E402


# ══════════════════════════════════════════════════════════════════════════
# Session-Scoped Fixtures (created once for all tests)
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture(scope="session", autouse=True)
def test_database_dir():
    """
    Owns the temporary directory behind DATABASE_URL.

    What:    Yields the directory created at import time, then removes it.
    Why:     The suite never opens the module engine (every SQL test builds
             its own under tmp_path), so nothing holds the file at teardown.
    """
    yield _test_dir

    shutil.rmtree(_test_dir, ignore_errors=True)


# ══════════════════════════════════════════════════════════════════════════
# Function-Scoped Fixtures (created fresh for each test)
# ══════════════════════════════════════════════════════════════════════════


@pytest.fixture
def prius():
    return Car(name="prius", type="hybrid")


@pytest.fixture
def memory_repository(prius):
    """In-memory provider holding exactly one car: prius/hybrid."""
    return InMemoryCarRepository([prius])


@pytest_asyncio.fixture
async def sql_session_factory(tmp_path):
    """
    Provides a session factory over an isolated SQLite database.

    What:    A fresh database file per test with the `cars` table created.
    Why:     Exercises the real SQL provider without PostgreSQL.
    How:     aiosqlite driver + Base.metadata.create_all; engine disposed after.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'cars.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    await engine.dispose()


@pytest.fixture
def seed_cars(sql_session_factory):
    """
    Returns a coroutine function that writes cars straight into storage.

    Usage:
        await seed_cars(Car(name="prius", type="hybrid"))
    """
    async def _seed(*cars: Car) -> None:
        async with sql_session_factory() as session:
            session.add_all([CarRecord(name=car.name, type=car.type) for car in cars])
            await session.commit()

    return _seed


@pytest.fixture
def client_for():
    """
    Returns a factory for HTTP test clients around a composed app.

    What:    create_app(car_service=...) wrapped in an HTTPX AsyncClient.
    How:     ASGITransport routes requests directly to the app (no server).
             Pass raise_app_exceptions=False to inspect the 500 produced by
             the catch-all handler instead of having the error re-raised.

    Usage:
        async with client_for(CarService(memory_repository)) as client:
            response = await client.get("/cars/prius")
    """
    def _client(car_service: CarService, raise_app_exceptions: bool = True) -> AsyncClient:
        app = create_app(car_service=car_service)
        transport = ASGITransport(app=app, raise_app_exceptions=raise_app_exceptions)
        return AsyncClient(transport=transport, base_url="http://test")

    return _client
