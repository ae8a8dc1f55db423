"""Metrics module using Prometheus."""

from .prometheus_metrics import (
    HTTPMetrics,
    setup_metrics,
    get_metrics_handler,
)

__all__ = [
    "HTTPMetrics",
    "setup_metrics",
    "get_metrics_handler",
]
