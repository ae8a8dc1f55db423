"""Prometheus metrics definitions and helpers.

Provides HTTP request metric definitions for the API service.
"""

from typing import Callable

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    generate_latest,
    REGISTRY,
    CollectorRegistry,
)


class HTTPMetrics:
    """HTTP request metrics, labelled by method and route template."""

    def __init__(self, registry: CollectorRegistry = REGISTRY) -> None:
        """Initialize HTTP metrics.

        Args:
            registry: Prometheus registry to use
        """
        self.registry = registry

        # Requests served
        self.requests_total = Counter(
            "http_requests_total",
            "Total HTTP requests",
            ["method", "endpoint", "status"],
            registry=registry,
        )

        # Request latency
        self.request_duration = Histogram(
            "http_request_duration_seconds",
            "HTTP request duration in seconds",
            ["method", "endpoint"],
            buckets=[0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
            registry=registry,
        )

        # Requests currently being handled
        self.requests_in_progress = Gauge(
            "http_requests_in_progress",
            "HTTP requests currently in progress",
            ["method", "endpoint"],
            registry=registry,
        )

    def request_started(self, method: str, endpoint: str) -> None:
        """Count a request as in progress."""
        self.requests_in_progress.labels(method=method, endpoint=endpoint).inc()

    def request_finished(self, method: str, endpoint: str) -> None:
        """Release a request counted by :meth:`request_started`."""
        self.requests_in_progress.labels(method=method, endpoint=endpoint).dec()

    def observe(self, method: str, endpoint: str, status_code: int, duration: float) -> None:
        """Record one completed request."""
        self.requests_total.labels(
            method=method, endpoint=endpoint, status=str(status_code)
        ).inc()
        self.request_duration.labels(method=method, endpoint=endpoint).observe(duration)


def setup_metrics(registry: CollectorRegistry = REGISTRY) -> HTTPMetrics:
    """Setup and return the HTTP metric instance.

    Args:
        registry: Prometheus registry to register the collectors in

    Returns:
        HTTPMetrics bound to the registry
    """
    return HTTPMetrics(registry)


def get_metrics_handler(registry: CollectorRegistry = REGISTRY) -> Callable[[], bytes]:
    """Get metrics handler for HTTP endpoint.

    Args:
        registry: Prometheus registry to expose

    Returns:
        Function that generates Prometheus metrics output
    """

    def metrics_handler() -> bytes:
        return generate_latest(registry)

    return metrics_handler
