"""FastAPI application for the forge-log API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from .. import __version__
from ..config import Settings, create_storage, load_settings
from ..db import SqliteStorage, Storage, init_db, seed_demo_data
from ..errors import ForgeLogError
from .routers import ROUTERS

logger = logging.getLogger(__name__)


def _error_list(errors) -> list[dict]:
    return [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in errors
    ]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Prepare storage on startup and release it on shutdown."""
    storage: Storage = app.state.storage
    settings: Settings = app.state.settings
    if isinstance(storage, SqliteStorage):
        await init_db(storage.db_path)
    if settings.seed:
        await seed_demo_data(storage)
    yield
    await storage.close()


def create_app(storage: Storage | None = None, settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        storage: Backend to serve. Built from ``settings`` when omitted.
        settings: Runtime settings. Loaded from the environment when omitted.
    """
    settings = settings or load_settings()
    app = FastAPI(
        title="forge-log",
        description="Personal fitness tracking API",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.storage = storage if storage is not None else create_storage(settings)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid data", "errors": _error_list(exc.errors())},
        )

    @app.exception_handler(ValidationError)
    async def validation_handler(request: Request, exc: ValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid data", "errors": _error_list(exc.errors())},
        )

    @app.exception_handler(ForgeLogError)
    async def forge_log_error_handler(request: Request, exc: ForgeLogError):
        return JSONResponse(status_code=exc.status_code, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    for router in ROUTERS:
        app.include_router(router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
