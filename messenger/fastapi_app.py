"""
FastAPI Application Factory.
Creates and configures the FastAPI application with all routers, middleware, and DI.

Routes:
- POST /users/add, /chats/add, /chats/get, /messages/add, /messages/get
- GET /health, /metrics
"""

import time
from contextlib import asynccontextmanager
from typing import Optional

from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware

from messenger import __version__
from messenger.config.logging_config import (
    NO_CORRELATION_ID,
    component_logger,
    correlation_id_var,
    setup_logging,
)
from messenger.config.settings import Config
from messenger.domain.exceptions import DomainValidationError, StorageError
from messenger.observability.metrics import observe_request_latency
from messenger.presentation.api import (
    VALIDATION_MESSAGES,
    chats_router,
    messages_router,
    metrics_router,
    users_router,
)
from messenger.presentation.api.responses import message_response
from messenger.setup.ioc.container import create_container

# Setup logging
setup_logging(Config.LOG_LEVEL, Config.LOG_PATH)

logger = component_logger("HTTP")


class CorrelationIdMiddleware(BaseHTTPMiddleware):
    """Middleware to extract and set correlation ID from request headers."""

    async def dispatch(self, request: Request, call_next):
        correlation_id = request.headers.get("X-Correlation-ID", NO_CORRELATION_ID)

        # Set in contextvars (propagates to async tasks and logging)
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)

        response.headers["X-Correlation-ID"] = correlation_id
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """Records request latency per route template."""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        route = request.scope.get("route")
        observe_request_latency(
            request.method,
            getattr(route, "path", "unmatched"),
            response.status_code,
            time.perf_counter() - start,
        )
        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    FastAPI lifespan context manager.

    - Startup: nothing to do, the store connects on first use
    - Shutdown: Close DI container (closes the MongoDB client)
    """
    logger.info("FastAPI application started. DI container initialized.")
    yield
    await app.state.dishka_container.close()
    logger.info("FastAPI application shutdown. DI container closed.")


def create_fastapi_app(container: Optional[AsyncContainer] = None) -> FastAPI:
    """
    Application factory for creating FastAPI app.

    Args:
        container: DI container to use; defaults to create_container()

    Returns:
        FastAPI application instance
    """
    app = FastAPI(
        title="Messenger API",
        description="Users, chats and messages over a document store",
        version=__version__,
        lifespan=lifespan,
    )

    # Setup Dishka BEFORE app starts (must add middleware before startup)
    setup_dishka(container or create_container(), app)

    app.add_middleware(MetricsMiddleware)
    # Correlation ID middleware (must be added before CORS)
    app.add_middleware(CorrelationIdMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ):
        errors = exc.errors()
        if any(error.get("type") == "json_invalid" for error in errors):
            logger.info(f"Malformed JSON body on {request.url.path}")
            return message_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON format")

        logger.info(f"Invalid body on {request.url.path}: {errors}")
        return message_response(
            422,
            VALIDATION_MESSAGES.get(request.url.path, "Invalid request data"),
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        # Every route is POST-only; a wrong method is reported like an unknown path
        if exc.status_code in (
            status.HTTP_404_NOT_FOUND,
            status.HTTP_405_METHOD_NOT_ALLOWED,
        ):
            return message_response(status.HTTP_404_NOT_FOUND, "Route not found")
        return message_response(exc.status_code, str(exc.detail))

    @app.exception_handler(DomainValidationError)
    async def domain_validation_exception_handler(
        request: Request, exc: DomainValidationError
    ):
        logger.info(f"Rejected by domain rules on {request.url.path}: {exc.message}")
        return message_response(422, exc.message)

    @app.exception_handler(StorageError)
    async def storage_exception_handler(request: Request, exc: StorageError):
        logger.error(f"Storage failure on {request.url.path}: {exc}")
        return message_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.url.path}: {exc}")
        return message_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal Server Error"
        )

    @app.get("/health", tags=["health"])
    async def health():
        return {"status": "healthy"}

    # Register routers
    app.include_router(users_router)  # POST /users/add
    app.include_router(chats_router)  # POST /chats/add, /chats/get
    app.include_router(messages_router)  # POST /messages/add, /messages/get
    app.include_router(metrics_router)  # GET /metrics

    return app


# Create the app instance
app = create_fastapi_app()
