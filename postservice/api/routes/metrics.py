"""Prometheus scrape endpoint (GET /api/v1/metrics)."""

from fastapi import APIRouter, Depends, Response

from postservice.api.dependencies.services import get_metrics_collector
from postservice.infrastructure.monitoring.metrics import (
    METRICS_CONTENT_TYPE,
    MetricsCollector,
)

router = APIRouter(tags=["metrics"])


@router.get(
    "/metrics",
    summary="Prometheus metrics",
    response_class=Response,
    responses={200: {"content": {METRICS_CONTENT_TYPE: {}}}},
)
async def get_metrics(
    collector: MetricsCollector = Depends(get_metrics_collector),
) -> Response:
    """Uptime, starts and per-route request metrics of this instance."""
    return Response(content=collector.generate(), media_type=METRICS_CONTENT_TYPE)
