"""Unit tests for the Prometheus MetricsCollector."""

import time

from prometheus_client import CollectorRegistry

from postservice.infrastructure.monitoring import METRICS_CONTENT_TYPE, MetricsCollector


class TestMetricsCollector:
    """Tests for MetricsCollector."""

    def test_collectors_do_not_share_registries(self) -> None:
        """Two collectors in one process register the same names independently."""
        first = MetricsCollector()
        second = MetricsCollector()

        assert first.get_registry() is not second.get_registry()

    def test_custom_registry_is_used(self) -> None:
        registry = CollectorRegistry()

        collector = MetricsCollector(registry=registry)

        assert collector.get_registry() is registry

    def test_request_counters(self) -> None:
        collector = MetricsCollector(service_name="postservice", environment="test")

        collector.increment_requests("GET", "/api/v1/posts", "200")
        collector.increment_requests("GET", "/api/v1/posts", "200")
        collector.increment_failed_requests(
            "GET", "/api/v1/posts/{post_id}", "404", error_type="not_found"
        )

        output = collector.generate().decode("utf-8")
        assert (
            'http_requests_total{endpoint="/api/v1/posts",environment="test",'
            'method="GET",service="postservice",status="200"} 2.0'
        ) in output
        assert 'error_type="not_found"' in output

    def test_histogram_recording(self) -> None:
        collector = MetricsCollector()

        collector.observe_request_duration("GET", "/api/v1/health", 0.03)

        output = collector.generate().decode("utf-8")
        assert "http_request_duration_seconds_bucket" in output
        assert 'le="0.05"' in output

    def test_record_startup_counts_and_tracks_uptime(self) -> None:
        collector = MetricsCollector(service_name="api")

        collector.record_startup()
        time.sleep(0.01)

        assert collector.get_uptime_seconds() >= 0.01
        output = collector.generate().decode("utf-8")
        assert 'service_starts_total{environment="development",service="api"} 1.0' in output
        assert 'uptime_seconds{environment="development",service="api"}' in output

    def test_uptime_zero_before_startup(self) -> None:
        assert MetricsCollector().get_uptime_seconds() == 0.0

    def test_content_type(self) -> None:
        assert METRICS_CONTENT_TYPE.startswith("text/plain; version=0.0.4")
