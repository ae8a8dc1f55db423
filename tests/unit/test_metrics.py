"""
Unit tests for Prometheus HTTP metrics.

Tests cover:
- Counter and histogram updates per request
- In-progress gauge
- Registry isolation
- Exposition output from the metrics handler
"""

from prometheus_client import CollectorRegistry

from shared.metrics import HTTPMetrics, get_metrics_handler, setup_metrics


class TestHTTPMetrics:
    """HTTPMetrics collectors."""

    def test_observe_increments_request_counter(self):
        """Test each observation increments the labelled counter."""
        registry = CollectorRegistry()
        metrics = HTTPMetrics(registry)

        metrics.observe("GET", "/users/{id}", 200, 0.01)
        metrics.observe("GET", "/users/{id}", 200, 0.02)

        value = registry.get_sample_value(
            "http_requests_total",
            {"method": "GET", "endpoint": "/users/{id}", "status": "200"},
        )
        assert value == 2.0

    def test_observe_records_duration(self):
        """Test durations are recorded in the histogram."""
        registry = CollectorRegistry()
        metrics = HTTPMetrics(registry)

        metrics.observe("POST", "/transfers", 200, 0.5)

        count = registry.get_sample_value(
            "http_request_duration_seconds_count",
            {"method": "POST", "endpoint": "/transfers"},
        )
        total = registry.get_sample_value(
            "http_request_duration_seconds_sum",
            {"method": "POST", "endpoint": "/transfers"},
        )
        assert count == 1.0
        assert total == 0.5

    def test_status_codes_are_separate_series(self):
        """Test different status codes do not share a counter."""
        registry = CollectorRegistry()
        metrics = HTTPMetrics(registry)

        metrics.observe("GET", "/users/{id}", 200, 0.01)
        metrics.observe("GET", "/users/{id}", 400, 0.01)

        assert registry.get_sample_value(
            "http_requests_total",
            {"method": "GET", "endpoint": "/users/{id}", "status": "400"},
        ) == 1.0

    def test_setup_metrics_uses_given_registry(self):
        """Test setup_metrics binds collectors to the given registry."""
        registry = CollectorRegistry()
        metrics = setup_metrics(registry)
        assert metrics.registry is registry


class TestMetricsHandler:
    """Exposition handler."""

    def test_handler_renders_registry(self):
        """Test the handler renders metrics in text exposition format."""
        registry = CollectorRegistry()
        metrics = HTTPMetrics(registry)
        metrics.observe("GET", "/health", 200, 0.001)

        output = get_metrics_handler(registry)().decode("utf-8")

        assert "# TYPE http_requests_total counter" in output
        assert 'endpoint="/health"' in output


class TestInProgressGauge:
    """request_started() / request_finished()"""

    def test_started_and_finished_balance(self):
        """Test the gauge rises while a request runs and returns to zero."""
        registry = CollectorRegistry()
        metrics = HTTPMetrics(registry)
        labels = {"method": "GET", "endpoint": "/users/{id}"}

        metrics.request_started("GET", "/users/{id}")
        assert registry.get_sample_value("http_requests_in_progress", labels) == 1.0

        metrics.request_finished("GET", "/users/{id}")
        assert registry.get_sample_value("http_requests_in_progress", labels) == 0.0

    def test_endpoints_tracked_separately(self):
        """Test concurrent requests on different routes use separate series."""
        registry = CollectorRegistry()
        metrics = HTTPMetrics(registry)

        metrics.request_started("GET", "/users")
        metrics.request_started("POST", "/transfers")
        metrics.request_finished("GET", "/users")

        assert registry.get_sample_value(
            "http_requests_in_progress", {"method": "GET", "endpoint": "/users"}
        ) == 0.0
        assert registry.get_sample_value(
            "http_requests_in_progress", {"method": "POST", "endpoint": "/transfers"}
        ) == 1.0
