"""Request logging middleware.

Every request runs under a correlation id taken from ``X-Correlation-ID`` or
freshly generated. The id is stored in the correlation contextvar, so every
structlog event emitted while handling the request carries it, and it is
echoed on the response.

Events:
- request_started
- request_completed (info below 500, warning for 5xx responses)
- request_failed (an exception escaped the app; re-raised)
"""

import time
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from structlog import get_logger

from postservice.infrastructure.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    set_correlation_id,
)

logger = get_logger()


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Bind a correlation id to each request and log its lifecycle."""

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        incoming = request.headers.get(CORRELATION_ID_HEADER)
        correlation_id = incoming or generate_correlation_id()
        set_correlation_id(correlation_id)

        log = logger.bind(
            component="http",
            method=request.method,
            path=request.url.path,
            client_host=request.client.host if request.client else None,
        )
        log.info("request_started", correlation_id_generated=incoming is None)

        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                duration_ms=_elapsed_ms(start),
                error_type=type(exc).__name__,
            )
            raise

        emit = log.warning if response.status_code >= 500 else log.info
        emit(
            "request_completed",
            status_code=response.status_code,
            duration_ms=_elapsed_ms(start),
        )
        response.headers[CORRELATION_ID_HEADER] = correlation_id
        return response
