"""API middleware components."""

from postservice.api.middleware.logging_middleware import LoggingMiddleware
from postservice.api.middleware.metrics_middleware import MetricsMiddleware

__all__: list[str] = [
    "LoggingMiddleware",
    "MetricsMiddleware",
]
