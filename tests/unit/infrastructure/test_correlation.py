"""Unit tests for correlation ID management.

Tests the correlation ID context management and structlog processor.
"""

import asyncio
import re

import pytest

from postservice.infrastructure.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)


class TestGenerateCorrelationId:
    """Tests for generate_correlation_id function."""

    def test_generate_returns_uuid_format(self) -> None:
        uuid_pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
            re.IGNORECASE,
        )
        assert uuid_pattern.match(generate_correlation_id()) is not None

    def test_generate_returns_unique_ids(self) -> None:
        ids = [generate_correlation_id() for _ in range(100)]
        assert len(set(ids)) == 100


class TestCorrelationIdContext:
    """Tests for correlation ID context management."""

    def test_set_and_get_correlation_id(self) -> None:
        set_correlation_id("test-correlation-id-123")

        assert get_correlation_id() == "test-correlation-id-123"

    @pytest.mark.asyncio
    async def test_tasks_keep_their_own_id(self) -> None:
        """Each task sees the ID it set, not one set by a sibling task."""

        async def handle(request_id: str) -> str:
            set_correlation_id(request_id)
            await asyncio.sleep(0.01)
            return get_correlation_id()

        results = await asyncio.gather(handle("a"), handle("b"), handle("c"))

        assert results == ["a", "b", "c"]


class TestCorrelationIdProcessor:
    """Tests for the structlog processor."""

    def test_adds_correlation_id_when_set(self) -> None:
        set_correlation_id("abc")

        event = correlation_id_processor(None, "info", {"event": "x"})

        assert event["correlation_id"] == "abc"

    def test_leaves_event_unchanged_when_unset(self) -> None:
        set_correlation_id("")

        event = correlation_id_processor(None, "info", {"event": "x"})

        assert "correlation_id" not in event
