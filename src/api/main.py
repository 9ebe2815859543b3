"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures routers and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request

from src.adapters.sessions.memory import InMemoryFormSessions
from src.api.dependencies import get_submission_sink
from src.api.v1 import router as v1_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "v1",
        "description": "Registration Form API v1 - Edit, submit and reset a registration form",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Applies the configured log level to the src.* loggers
    - Creates the in-memory form session registry on startup
    - Drops all form sessions on shutdown
    """
    settings = get_settings()
    logging.getLogger("src").setLevel(settings.log_level)

    logger.info("Starting application...")

    # Store registry in app state for dependency injection
    app.state.form_sessions = InMemoryFormSessions(
        sink=get_submission_sink(),
        max_sessions=settings.max_sessions,
    )

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    logger.info("Dropping %s form session(s)", len(app.state.form_sessions))
    del app.state.form_sessions


app = FastAPI(
    title="registration-form",
    description="Registration Form API - Field edits, per-field validation, submit and reset",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

# Include v1 API routes
app.include_router(v1_router, prefix="/v1")


@app.get("/health")
async def health_check(request: Request) -> dict[str, str | int]:
    """
    Health check endpoint.

    Returns 200 OK once the form session registry is available.
    """
    sessions = request.app.state.form_sessions
    return {"status": "healthy", "sessions": len(sessions)}
