"""Logging setup for one application instance."""

from __future__ import annotations

from postservice.config.service_config import ServiceConfig
from postservice.infrastructure.observability import (
    configure_structlog,
    get_logger_for_service,
)


def configure_logging(config: ServiceConfig) -> None:
    """Configure structlog for config.environment and announce it."""
    configure_structlog(environment=config.environment)
    get_logger_for_service(config.service_name, component="bootstrap").debug(
        "logging_configured",
        environment=config.environment,
        json_output=config.is_production,
    )
