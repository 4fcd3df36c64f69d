"""structlog configuration.

``ENVIRONMENT=production`` renders one JSON object per line, e.g.::

    {"event": "post_created", "post_id": "...", "level": "info",
     "timestamp": "2026-01-08T12:00:00.000000Z", "correlation_id": "..."}

Every other environment uses the colored console renderer. LOG_LEVEL sets
the minimum level (default INFO; unknown names fall back to INFO).
"""

import logging
import os
from typing import cast

import structlog
from structlog.typing import Processor

from postservice.infrastructure.observability.correlation import (
    correlation_id_processor,
)

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"
PRODUCTION = "production"


def _get_log_level() -> int:
    name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def _renderer(environment: str) -> Processor:
    if environment == PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=True)


def build_processors(environment: str) -> list[Processor]:
    """Processor chain for an environment, renderer last."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
        _renderer(environment),
    ]


def configure_structlog(environment: str = PRODUCTION) -> None:
    """Install the processor chain and level filter process-wide.

    Called by create_app before the container is built.

    Args:
        environment: "production" for JSON output, anything else for console.
    """
    structlog.configure(
        processors=build_processors(environment),
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str
) -> structlog.typing.FilteringBoundLogger:
    """Logger with ``service`` and ``component`` bound."""
    return structlog.get_logger().bind(service=service_name, component=component)
