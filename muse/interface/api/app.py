"""FastAPI application."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from muse.config import Settings
from muse.domain.error import DomainError
from muse.domain.service import TokenService
from muse.interface.api.routes import auth, health, themes, users
from muse.util.di.container import create_container, setup_di
from muse.util.observability import instrument_fastapi

logger = logging.getLogger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"data": None, "error": message}
    )


async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    """Render a domain error with its own status and message."""
    return _error_response(exc.status_code, exc.message)


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed input as 400 with the first problem found."""
    errors = exc.errors()
    if errors:
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"][1:])
        message = f"{field}: {first['msg']}" if field else first["msg"]
    else:
        message = "Invalid request."
    return _error_response(status.HTTP_400_BAD_REQUEST, message)


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log an unexpected failure and hide its details from the caller."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error"
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    container: AsyncContainer = app.state.dishka_container
    # Fails startup when no signing secret is configured
    await container.get(TokenService)
    logger.info("Application started")
    yield
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to serve from; the production container
            is built when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Muse API",
        description="Accounts, sign-in, password recovery and theme preferences for Muse",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(DomainError, domain_error_handler)
    app_instance.add_exception_handler(RequestValidationError, validation_error_handler)
    app_instance.add_exception_handler(Exception, unhandled_error_handler)

    # Setup dependency injection
    if container is None:
        container = create_container()
    setup_di(app_instance, container)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)
    app_instance.include_router(themes.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
