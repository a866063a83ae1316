"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from psycopg_pool import ConnectionPool

from src.adapters.http.profile_service import HttpProfileDirectory
from src.adapters.repository.postgres import run_migrations
from src.api.routes import router as auth_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

SERVICE_NAME = "auth-service"

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "auth",
        "description": "Register, log in, reset passwords and look up the current account",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool and runs migrations
    - Starts the shared profile service HTTP client
    - Closes both on shutdown
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level)

    logger.info("Starting application...")
    logger.info("Connecting to database...")

    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )

    logger.info("Running database migrations...")
    run_migrations(pool)

    profile_directory = HttpProfileDirectory(
        base_url=settings.user_service_url,
        timeout=settings.user_service_timeout_seconds,
    )
    profile_directory.start()

    # Store shared resources in app state for dependency injection
    app.state.pool = pool
    app.state.profile_directory = profile_directory

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    profile_directory.close()
    pool.close()
    logger.info("Database connection pool closed")


app = FastAPI(
    title=SERVICE_NAME,
    description="Authentication API - Registration orchestrated across the local account "
    "store and the remote user profile service",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, prefix="/api/auth")


@app.get("/api/health", tags=["health"])
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = request.app.state.pool
    with pool.connection() as conn:
        conn.execute("SELECT 1")

    return {"status": "healthy", "service": SERVICE_NAME}
