"""
Main entrypoint for the Politely Failed API.

This module assembles the FastAPI application, sets up logging,
middleware and error handlers, and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Importing the app here
makes it easy to run with uvicorn or another ASGI server, e.g.::

    uvicorn politely_failed_api.app.main:app --reload

``create_app`` constructs the ``MessageStore`` and ``MessageService``
and keeps them on ``app.state``.  The messages file is loaded by the
startup event, before the server accepts requests; if it cannot be
loaded, startup fails and the server exits.
"""

import logging
from http import HTTPStatus
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api import health
from .api.v1.endpoints import admin
from .api.v1.router import router as v1_router
from .core.config import Settings, get_messages_path, settings
from .core.errors import LoadError, PolitelyFailedError, ValidationError
from .core.logging_config import setup_logging
from .core.utils import utc_timestamp
from .schemas.error import ErrorResponse
from .services.message_service import MessageService
from .services.message_store import MessageStore

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "X-DNS-Prefetch-Control": "off",
}


def error_response(status_code: int, error: str, message: str) -> JSONResponse:
    """Build the JSON error envelope used by every failing route."""
    body = ErrorResponse(error=error, message=message, timestamp=utc_timestamp())
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    """Map exceptions onto the JSON error envelope."""

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return error_response(400, "Validation Error", exc.message)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        errors = exc.errors()
        message = errors[0].get("msg", "Invalid request") if errors else "Invalid request"
        return error_response(400, "Validation Error", message)

    @app.exception_handler(PolitelyFailedError)
    async def service_error_handler(request: Request, exc: PolitelyFailedError) -> JSONResponse:
        # NotFoundError after validation means the data itself has no
        # usable entry, and LoadError means the store has no data.
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return error_response(500, "Internal Server Error", str(exc))

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        if exc.status_code == 404:
            return error_response(404, "Not Found", f"Cannot {request.method} {request.url.path}")
        try:
            phrase = HTTPStatus(exc.status_code).phrase
        except ValueError:
            phrase = "Error"
        return error_response(exc.status_code, phrase, str(exc.detail))


def create_app(config: Optional[Settings] = None, store: Optional[MessageStore] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    config : Optional[Settings]
        Settings to use instead of the module‑level ``settings``.
    store : Optional[MessageStore]
        Pre‑built store, mainly for tests.  By default a store is
        created for the path configured in ``config``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    config = config or settings
    # Initialise logging before anything else so that the store can
    # report problems found while loading.
    setup_logging(config.log_level, config.log_file or None)

    app = FastAPI(title=config.project_name, version=config.api_version)

    store = store or MessageStore(get_messages_path(config))
    app.state.settings = config
    app.state.message_store = store
    app.state.message_service = MessageService(store)

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def guard_and_secure(request: Request, call_next):
        """Turn unhandled exceptions into 500 envelopes and add security headers."""
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.exception("Unhandled error on %s %s", request.method, request.url.path)
            response = error_response(500, "Internal Server Error", str(exc) or "An unexpected error occurred")
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        return response

    register_error_handlers(app)

    app.include_router(health.router, tags=["health"])
    app.include_router(v1_router, prefix="/api/v1")
    if config.enable_reload_endpoint:
        app.include_router(admin.router, prefix="/api/v1/admin", tags=["admin"])

    @app.on_event("startup")
    async def startup_event() -> None:
        # Load the messages before serving; a LoadError here aborts startup.
        try:
            store.load()
        except LoadError:
            logger.critical("Cannot start without a valid messages file (%s)", store.path)
            raise
        logger.info("Politely Failed API ready with %d messages", store.message_count())

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        logger.info("Politely Failed API shutting down")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
