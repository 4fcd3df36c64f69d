"""Structured logging (structlog) and per-request correlation ids.

create_app configures logging once per application; LoggingMiddleware sets
the correlation id for each request and the processor chain stamps it on
every event.
"""

from postservice.infrastructure.observability.correlation import (
    CORRELATION_ID_HEADER,
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from postservice.infrastructure.observability.logging import (
    build_processors,
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "CORRELATION_ID_HEADER",
    "build_processors",
    "configure_structlog",
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "set_correlation_id",
]
