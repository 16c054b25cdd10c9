"""
Main FastAPI application entry point.

This module initializes the FastAPI application instance, wires middleware
and exception handlers, and mounts the system and versioned routers.

The resource registry is built during startup so a misconfigured version
route registry (duplicate versions) stops the process before it serves
traffic.
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from src.core.config import settings
from src.core.container import get_logger, get_resource_registry
from src.presentation.routers import system_router
from src.presentation.routers.api.flip import flip_router
from src.presentation.routers.api.flip.errors import register_exception_handlers
from src.presentation.api.middleware.trace_middleware import TraceMiddleware


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan context manager.

    Handles startup and shutdown events:
    - Startup: Build the resource registry (fails fast on duplicates)
    - Shutdown: Nothing to release; the registry is in memory

    Args:
        app: FastAPI application instance.

    Yields:
        None during application lifetime.
    """
    registry = get_resource_registry()
    get_logger().info(
        "Application started",
        environment=settings.environment.value,
        resources=registry.resources(),
    )

    yield

    get_logger().info("Application stopped")


# Initialize FastAPI application with settings and lifespan
app = FastAPI(
    title=settings.app_name,
    description="Versioned resources negotiated through vendor media types",
    version=settings.app_version,
    docs_url="/docs",
    redoc_url="/redoc",
    debug=settings.debug,
    lifespan=lifespan,
)

# Wire trace middleware (request correlation)
app.add_middleware(TraceMiddleware)

# Register global exception handlers (RFC 7807 error responses)
register_exception_handlers(app)

app.include_router(system_router)
app.include_router(flip_router)
