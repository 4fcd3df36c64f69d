"""Request metrics middleware.

Every response is timed and counted on the container's MetricsCollector.
The endpoint label is the matched route template
(``/api/v1/posts/{post_id}``), so per-post URLs stay one series; requests
that match no route share ``unmatched``.
"""

import time
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

UNMATCHED_ENDPOINT = "unmatched"

_ERROR_TYPES = {
    400: "bad_request",
    404: "not_found",
    405: "method_not_allowed",
    422: "unprocessable",
    500: "internal_error",
    503: "service_unavailable",
}


def _classify_error_type(status_code: int) -> str:
    """Map a failure status to the error_type label."""
    if status_code in _ERROR_TYPES:
        return _ERROR_TYPES[status_code]
    if status_code >= 500:
        return "server_error"
    if status_code >= 400:
        return "client_error"
    return "unknown"


def _endpoint_label(request: Request) -> str:
    """Route template of the matched route, or UNMATCHED_ENDPOINT."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or UNMATCHED_ENDPOINT


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record latency, request count and failures for each request."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            # Unhandled errors become a 500 in ServerErrorMiddleware
            self._record(request, 500, time.perf_counter() - start)
            raise
        self._record(request, response.status_code, time.perf_counter() - start)
        return response

    @staticmethod
    def _record(request: Request, code: int, elapsed: float) -> None:
        metrics = request.app.state.container.metrics
        labels = {"method": request.method, "endpoint": _endpoint_label(request)}

        metrics.observe_request_duration(duration=elapsed, **labels)
        metrics.increment_requests(status=str(code), **labels)
        if code >= 400:
            metrics.increment_failed_requests(
                status=str(code), error_type=_classify_error_type(code), **labels
            )
