"""Prometheus metrics for postservice.

Series (all labelled with ``service`` and ``environment``):
- uptime_seconds: seconds since record_startup, refreshed on every scrape
- service_starts_total: container startups
- http_request_duration_seconds: latency by method and route template
- http_requests_total: requests by method, route template and status
- http_requests_failed_total: 4xx/5xx responses, additionally by error_type

A collector owns its CollectorRegistry. Two apps built in one process (or
one per test) therefore never collide on metric names.
"""

import time

from prometheus_client import (
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

METRICS_CONTENT_TYPE = "text/plain; version=0.0.4; charset=utf-8"

# 10ms to 10s
DEFAULT_HISTOGRAM_BUCKETS = (0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0)

_BASE_LABELS = ("service", "environment")
_REQUEST_LABELS = (*_BASE_LABELS, "method", "endpoint")


class MetricsCollector:
    """Request and lifecycle metrics of one service instance.

    Attributes:
        uptime_seconds: Gauge of seconds since startup.
        service_starts_total: Counter of startups.
        http_request_duration_seconds: Request latency histogram.
        http_requests_total: Counter of every request.
        http_requests_failed_total: Counter of 4xx and 5xx responses.
    """

    def __init__(
        self,
        service_name: str = "postservice",
        environment: str = "development",
        registry: CollectorRegistry | None = None,
    ) -> None:
        """Create the metric families on a registry.

        Args:
            service_name: Value of the ``service`` label.
            environment: Value of the ``environment`` label.
            registry: Registry to register on, a fresh one if None.
        """
        self._registry = registry or CollectorRegistry()
        self._labels = {"service": service_name, "environment": environment}
        self._started_at: float | None = None

        self.uptime_seconds = Gauge(
            "uptime_seconds",
            "Seconds since service start",
            _BASE_LABELS,
            registry=self._registry,
        )
        self.service_starts_total = Counter(
            "service_starts_total",
            "Total number of service starts",
            _BASE_LABELS,
            registry=self._registry,
        )
        self.http_request_duration_seconds = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            _REQUEST_LABELS,
            buckets=DEFAULT_HISTOGRAM_BUCKETS,
            registry=self._registry,
        )
        self.http_requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            (*_REQUEST_LABELS, "status"),
            registry=self._registry,
        )
        self.http_requests_failed_total = Counter(
            "http_requests_failed_total",
            "Total failed HTTP requests (4xx, 5xx)",
            (*_REQUEST_LABELS, "status", "error_type"),
            registry=self._registry,
        )

    def observe_request_duration(
        self, method: str, endpoint: str, duration: float
    ) -> None:
        """Record one request latency in seconds under its route template."""
        self.http_request_duration_seconds.labels(
            method=method, endpoint=endpoint, **self._labels
        ).observe(duration)

    def increment_requests(self, method: str, endpoint: str, status: str) -> None:
        self.http_requests_total.labels(
            method=method, endpoint=endpoint, status=status, **self._labels
        ).inc()

    def increment_failed_requests(
        self, method: str, endpoint: str, status: str, error_type: str = "http_error"
    ) -> None:
        """Count a failed request.

        Args:
            method: HTTP method.
            endpoint: Route template, e.g. /api/v1/posts/{post_id}.
            status: HTTP status code as a string.
            error_type: Classification such as not_found or internal_error.
        """
        self.http_requests_failed_total.labels(
            method=method,
            endpoint=endpoint,
            status=status,
            error_type=error_type,
            **self._labels,
        ).inc()

    def record_startup(self) -> None:
        """Count a start and reset the uptime origin."""
        self._started_at = time.monotonic()
        self.service_starts_total.labels(**self._labels).inc()

    def get_uptime_seconds(self) -> float:
        """Seconds since record_startup, 0.0 before the first start."""
        if self._started_at is None:
            return 0.0
        return time.monotonic() - self._started_at

    def generate(self) -> bytes:
        """Render the registry in Prometheus text format.

        The uptime gauge is refreshed first and only exists once the
        service has started.
        """
        if self._started_at is not None:
            self.uptime_seconds.labels(**self._labels).set(self.get_uptime_seconds())
        return generate_latest(self._registry)

    def get_registry(self) -> CollectorRegistry:
        return self._registry
