"""
Request logging middleware for FastAPI.

Provides:
- Correlation ID propagation (X-Correlation-ID)
- Structured request/response logging
- Prometheus request metrics labelled by route template
- Request duration header
"""

import time
import uuid
from typing import Optional

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.routing import Match

from shared.logging import bind_context, unbind_context
from shared.metrics import HTTPMetrics

logger = structlog.get_logger(__name__)

CORRELATION_ID_HEADER = "X-Correlation-ID"
DURATION_HEADER = "X-Request-Duration-Ms"

# Label used for requests that matched no route, keeps metric cardinality bounded.
UNMATCHED_ENDPOINT = "unmatched"


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for request logging, correlation IDs and metrics."""

    # Paths that are served but not logged at info level
    QUIET_PATHS = {
        "/health",
        "/metrics",
        "/favicon.ico",
    }

    def __init__(self, app, metrics: Optional[HTTPMetrics] = None):
        """
        Initialize request logging middleware.

        Args:
            app: ASGI application
            metrics: Metric collectors; metrics are skipped when None
        """
        super().__init__(app)
        self.metrics = metrics

    async def dispatch(self, request: Request, call_next) -> Response:
        """Process request and log details."""
        correlation_id = request.headers.get(CORRELATION_ID_HEADER) or str(uuid.uuid4())

        method = request.method
        path = request.url.path
        client_ip = request.client.host if request.client else "unknown"
        quiet = path in self.QUIET_PATHS
        endpoint = self._match_endpoint(request)

        bind_context(correlation_id=correlation_id)
        if self.metrics is not None:
            self.metrics.request_started(method, endpoint)

        start_time = time.perf_counter()
        log = logger.debug if quiet else logger.info
        log("request_started", method=method, path=path, client_ip=client_ip)

        try:
            response = await call_next(request)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(
                "request_failed",
                method=method,
                path=path,
                error=str(e),
                duration=f"{duration:.3f}s",
                exc_info=True
            )
            raise
        finally:
            unbind_context("correlation_id")
            if self.metrics is not None:
                self.metrics.request_finished(method, endpoint)

        duration = time.perf_counter() - start_time

        if self.metrics is not None:
            self.metrics.observe(method, endpoint, response.status_code, duration)

        log(
            "request_completed",
            method=method,
            path=path,
            endpoint=endpoint,
            status_code=response.status_code,
            duration=f"{duration:.3f}s",
            correlation_id=correlation_id
        )

        response.headers[CORRELATION_ID_HEADER] = correlation_id
        response.headers[DURATION_HEADER] = str(int(duration * 1000))

        return response

    @staticmethod
    def _match_endpoint(request: Request) -> str:
        """
        Return the route template the request will be routed to, e.g. ``/users/{id}``.

        Resolved before the request is dispatched so that in-progress and
        completed requests share the same label. A route matching on path
        only (wrong method) still names the endpoint.
        """
        partial = None
        for route in request.app.router.routes:
            match, _ = route.matches(request.scope)
            if match == Match.FULL:
                return getattr(route, "path_format", None) or UNMATCHED_ENDPOINT
            if match == Match.PARTIAL and partial is None:
                partial = route
        if partial is not None:
            return getattr(partial, "path_format", None) or UNMATCHED_ENDPOINT
        return UNMATCHED_ENDPOINT
