"""Per-request correlation ids.

The id lives in a ContextVar, so it follows the request across awaits and
into tasks spawned while handling it, and concurrent requests never see
each other's id.
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

CORRELATION_ID_HEADER = "X-Correlation-ID"

# "" means no request is being handled
_current_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """New random id (UUID4 string)."""
    return str(uuid4())


def get_correlation_id() -> str:
    return _current_id.get()


def set_correlation_id(correlation_id: str) -> None:
    _current_id.set(correlation_id)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor: add ``correlation_id`` while a request is active."""
    current = _current_id.get()
    if current:
        event_dict["correlation_id"] = current
    return event_dict
