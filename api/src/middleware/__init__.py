"""FastAPI middleware components.

This package contains custom middleware for request/response processing:
request logging, correlation IDs, request metrics and security headers.
"""

from api.src.middleware.request_logging import RequestLoggingMiddleware
from api.src.middleware.security_headers import SecurityHeadersMiddleware

__all__ = [
    "RequestLoggingMiddleware",
    "SecurityHeadersMiddleware",
]
