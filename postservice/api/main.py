"""FastAPI application entry point for postservice.

create_app builds one fully wired application: a ServiceContainer on
``app.state.container``, logging and metrics middleware, the 400 handler
for request validation failures, and the routers.

Routes:
- /api/v1/posts...         post CRUD
- /api/v1/health...        health, liveness, readiness, ping, components
- /api/v1/metrics          Prometheus exposition
- /health/live, /health/ready  unversioned orchestrator probes

Run with ``postservice`` (the console script) or
``uvicorn --factory postservice.api.main:create_app``.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from structlog import get_logger

from postservice import __version__
from postservice.api.middleware import LoggingMiddleware, MetricsMiddleware
from postservice.api.routes import (
    health_probe_router,
    health_router,
    metrics_router,
    posts_router,
)
from postservice.api.routes.problems import problem_detail
from postservice.bootstrap.container import ServiceContainer, build_container
from postservice.bootstrap.logging import configure_logging
from postservice.config.service_config import ServiceConfig

API_PREFIX = "/api/v1"

logger = get_logger()


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 400 problem details for an invalid request body or path."""
    errors = [
        {
            "loc": [str(part) for part in error.get("loc", ())],
            "msg": error.get("msg", ""),
            "type": error.get("type", ""),
        }
        for error in exc.errors()
    ]
    body = problem_detail(
        request,
        status.HTTP_400_BAD_REQUEST,
        "invalid-request",
        "Invalid Request",
        "Request validation failed",
    )
    body["errors"] = errors
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": body})


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start the container before serving and release it on shutdown.

    Raises:
        Exception: Startup failure (database unreachable, schema creation
            failed). The server does not start.
    """
    container: ServiceContainer = app.state.container
    try:
        await container.startup()
    except Exception as e:
        logger.critical(
            "service_startup_failed",
            error_type=type(e).__name__,
            error=str(e),
        )
        await container.shutdown()
        raise
    logger.info(
        "service_started",
        service=container.config.service_name,
        version=container.config.version,
        storage=container.config.storage_backend,
    )
    try:
        yield
    finally:
        await container.shutdown()
        logger.info("service_stopped", service=container.config.service_name)


def create_app(
    config: ServiceConfig | None = None,
    container: ServiceContainer | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        config: Service configuration (read from the environment if None).
        container: Pre-built container (built from config if None).

    Returns:
        The configured application.
    """
    if container is not None:
        config = container.config
    config = config or ServiceConfig.from_environment()
    configure_logging(config)
    container = container or build_container(config)

    app = FastAPI(
        title="Post Service API",
        description="Post CRUD with liveness, readiness and component health checks",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.container = container

    app.add_middleware(MetricsMiddleware)
    app.add_middleware(LoggingMiddleware)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(posts_router, prefix=API_PREFIX)
    app.include_router(health_router, prefix=API_PREFIX)
    app.include_router(metrics_router, prefix=API_PREFIX)
    app.include_router(health_probe_router)

    return app


def run() -> None:
    """Start the HTTP server with configuration from the environment."""
    config = ServiceConfig.from_environment()
    uvicorn.run(create_app(config), host=config.host, port=config.port)
