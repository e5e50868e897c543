"""
Cars API Backend — FastAPI Application Factory
===============================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes app configuration, middleware registration, route mounting,
       component wiring, and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn to start the server (uvicorn cars_api.main:app).

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌─────────────┐ ┌──────────┐          │
    │  │ Req ID   │→│  Logging    │→│  CORS    │          │
    │  └──────────┘ └─────────────┘ └──────────┘          │
    │                                                     │
    │  Routes:                                            │
    │  ┌────────────────────┐                             │
    │  │ GET /cars/{name}   │ → CarService → CarRepository│
    │  └────────────────────┘                             │
    │                                                     │
    │  Exception Handlers:                                │
    │  ┌──────────────────────────────────────────────┐   │
    │  │ DatabaseError→500 │ CarsApiError→500 │ *→500 │   │
    │  └──────────────────────────────────────────────┘   │
    └─────────────────────────────────────────────────────┘

Wiring:
    create_app() builds SqlAlchemyCarRepository → CarService once and keeps
    the service on app.state. There is no container; the route reads the
    service back through a one-line dependency. Tests pass their own
    service (e.g. over InMemoryCarRepository) to create_app().

Lifecycle:
    Startup:  configure logging, validate configuration, log startup
    Shutdown: dispose database engine (close all connections)
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cars_api import __version__
from cars_api.config import settings
from cars_api.database import async_session_factory, dispose_engine
from cars_api.exceptions import CarsApiError, DatabaseError
from cars_api.middleware.logging import RequestLoggingMiddleware
from cars_api.middleware.request_id import RequestIDMiddleware, request_id_var
from cars_api.repositories.sql import SqlAlchemyCarRepository
from cars_api.routes import cars
from cars_api.services.car_service import CarService

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    What:    Root logger to stdout at settings.log_level, one consistent format.
    When:    Called once during app startup, before anything else logs.
    """
    log_format = (
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[
            logging.StreamHandler(sys.stdout),  # Docker captures stdout
        ],
        force=True,  # Override any existing logging config
    )

    # These log every operation at DEBUG/INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Manage application lifecycle: startup and shutdown procedures.

    Code before yield runs on startup, code after yield on shutdown.
    """
    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging()
    logger.info("=" * 60)
    logger.info("Cars API starting up (version %s)...", __version__)

    try:
        settings.validate_required_for_production()
    except ValueError as e:
        # Keep serving: the lookup itself will fail with a logged DatabaseError
        logger.error("Configuration error: %s", str(e))
        logger.error("Fix the configuration and restart the server.")

    logger.info("Car lookups served by %s", type(app.state.car_service.repository).__name__)
    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)
    logger.info("=" * 60)

    yield  # Application runs here

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Cars API shutting down...")
    await dispose_engine()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register global exception handlers for consistent error responses.

    Handler hierarchy:
        DatabaseError           → 500 (generic message, context logged)
        CarsApiError (base)     → 500 (catch-all for custom errors)
        Exception (fallback)    → 500 (unexpected errors)

    CarNotFoundError never reaches these handlers: the /cars route turns it
    into a 204 itself.

    Security: handlers NEVER expose stack traces, SQL, or driver messages.
    Details are logged server-side.
    """

    @app.exception_handler(DatabaseError)
    async def handle_database_error(request: Request, exc: DatabaseError):
        """Database error: generic message to user, details logged server-side."""
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": "An internal error occurred. Please try again later.",
                "request_id": rid,
            },
        )

    @app.exception_handler(CarsApiError)
    async def handle_app_error(request: Request, exc: CarsApiError):
        """Any other application error that escaped its layer."""
        rid = request_id_var.get("")
        logger.error("[%s] Application error: %s | Context: %s", rid, exc.message, exc.context)
        return JSONResponse(
            status_code=500,
            content={
                "error": "server_error",
                "message": exc.message,
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        """
        Catch-all for truly unexpected errors.

        Returns a generic 500 with a request ID; the stack trace is logged only.
        """
        rid = request_id_var.get("")
        logger.error(
            "[%s] Unexpected error: %s",
            rid,
            str(exc),
            exc_info=True,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred. Please try again or contact support.",
                "request_id": rid,
            },
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def build_car_service() -> CarService:
    """Default composition: the `cars` table behind the lookup service."""
    repository = SqlAlchemyCarRepository(async_session_factory)
    return CarService(repository)


def create_app(car_service: Optional[CarService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        car_service: Prebuilt lookup service. Defaults to build_car_service().

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title="Cars API",
        description="Look up a car's type by its name.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # ── Compose Components ────────────────────────────────────────────────
    app.state.car_service = car_service if car_service is not None else build_car_service()

    # ── Register Middleware ───────────────────────────────────────────────
    # Middleware executes in REVERSE order of addition:
    # RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(cars.router)

    return app


# uvicorn expects `cars_api.main:app` to be importable
app = create_app()
