"""FastAPI application for the gymflow API."""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, configure_logging
from ..db.engine import init_db
from ..errors import GymFlowError
from .context import AppContext
from .responses import error
from .routers import auth, exercises, ranking, users, workouts

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    # Startup: Initialize database
    db_path = app.state.context.db_path
    if not db_path.exists():
        await init_db(db_path)
    yield


def _describe_validation_error(exc: RequestValidationError) -> str:
    """Turn pydantic's error list into one readable sentence."""
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query"))
    if first.get("type") == "missing":
        return f"Missing required field: {field}" if field else "All fields are required"
    return f"Invalid value for {field}: {first.get('msg')}" if field else first.get("msg", "Invalid request")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or Settings()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="gymflow",
        description="Workout plans, exercise logging and leaderboard API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.context = AppContext.from_settings(settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    @app.exception_handler(GymFlowError)
    async def handle_domain_error(request: Request, exc: GymFlowError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
            return error("Internal server error", exc.status_code)
        return error(exc.message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(request: Request, exc: RequestValidationError):
        return error(_describe_validation_error(exc), 400)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.exception("Unhandled error in %s %s", request.method, request.url.path)
        return error("Internal server error", 500)

    app.include_router(auth.router)
    app.include_router(users.router)
    app.include_router(exercises.router)
    app.include_router(workouts.router)
    app.include_router(ranking.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
