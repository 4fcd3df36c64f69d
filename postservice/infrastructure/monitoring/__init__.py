"""Infrastructure monitoring components.

Prometheus metrics collection and process runtime sampling.
"""

from postservice.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    MetricsCollector,
)
from postservice.infrastructure.monitoring.runtime_probe import ProcessRuntimeProbe

__all__: list[str] = [
    "METRICS_CONTENT_TYPE",
    "MetricsCollector",
    "ProcessRuntimeProbe",
]
