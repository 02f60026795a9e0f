"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("User created", user_id=str(user.id))

    with logfire.span("create_user", email=email):
        ...

Never pass passwords, hashes or tokens as span attributes.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from muse.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Cloud sending is enabled when ``OBSERVABILITY__SEND_TO_LOGFIRE`` is true,
    or when it is unset and ``OBSERVABILITY__LOGFIRE_TOKEN`` is present.

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    elif settings.observability.logfire_token:
        send_to_logfire = True
    else:
        send_to_logfire = False

    config_kwargs = {
        "service_name": "muse-api",
        "service_version": "0.1.0",
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``.

    Headers are not captured: they carry bearer tokens.
    """
    logfire.instrument_fastapi(app, capture_headers=False)
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL queries issued through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
    logfire.info("SQLAlchemy instrumented")
