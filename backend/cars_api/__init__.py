"""
Cars API Backend — Application Package Initializer
===================================================

What: Marks the `cars_api` directory as a Python package.
Why:  Enables module imports like `from cars_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend is three thin layers around a single lookup:

    ┌─────────────────────────────────────┐
    │        Routes (Boundary Layer)      │  ← HTTP concerns only (200 / 204)
    ├─────────────────────────────────────┤
    │      Services (Lookup Service)      │  ← found vs. not found
    ├─────────────────────────────────────┤
    │  Repositories (Lookup Providers)    │  ← SQL table or in-memory dict
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The service never sees HTTP and never sees SQL. The route never sees SQL.
    Each layer can be tested by swapping the layer beneath it.
"""

__version__ = "1.0.0"
