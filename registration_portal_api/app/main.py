"""
Main entrypoint for the Registration Portal API.

This module assembles the FastAPI application: logging, CORS, the
error handlers, the ``/api`` routers and the storage repository.  The
``create_app`` factory owns the repository instance and the settings
it was given, stored on ``app.state.storage`` and ``app.state.settings``;
route handlers receive them through the ``get_storage`` and
``get_app_settings`` dependencies, so tests can build an application
around a fresh repository and their own configuration.  A default
application is created at import time so an ASGI server can find it::

    uvicorn registration_portal_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.cors import setup_cors
from .core.logging_config import setup_logging
from .services.seed import DEFAULT_COURSES, DEFAULT_TOURS
from .services.storage import IStorage, MemStorage


logger = logging.getLogger(__name__)

_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


def _error_field(loc) -> str:
    parts = [str(part) for part in loc]
    if parts and parts[0] in _REQUEST_LOCATIONS:
        parts = parts[1:]
    return ".".join(parts) or "body"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Report schema violations as HTTP 400 with field‑level detail."""
    errors = [{"field": _error_field(error["loc"]), "message": error["msg"]} for error in exc.errors()]
    logger.info("Rejected %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid data", "errors": errors},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


def build_default_storage(config: Settings) -> IStorage:
    """Create the repository, seeded with the default catalogue if enabled."""
    if config.seed_default_data:
        return MemStorage(courses=DEFAULT_COURSES, tours=DEFAULT_TOURS)
    return MemStorage()


def create_app(storage: Optional[IStorage] = None, config: Settings = settings) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    storage : Optional[IStorage]
        Repository to serve.  When omitted a new ``MemStorage`` is
        built from ``config``.
    config : Settings
        Application settings; defaults to the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured application instance.
    """
    # Logging first so everything below can log.
    setup_logging(config)

    app = FastAPI(title=config.project_name, version=config.api_version, debug=config.debug)
    app.state.settings = config
    app.state.storage = storage if storage is not None else build_default_storage(config)

    setup_cors(app, config)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        return {"status": "ok"}

    app.include_router(api_router, prefix="/api")

    if config.admin_auth_required:
        logger.info("Admin routes require a session token")
    logger.info(
        "%s %s ready with %d courses and %d tours",
        config.project_name,
        config.api_version,
        len(app.state.storage.get_all_courses()),
        len(app.state.storage.get_all_tours()),
    )
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
