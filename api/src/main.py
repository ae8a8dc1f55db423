"""
FastAPI application entry point for the wallet and catalog API.

This module provides the main FastAPI application with:
- Route registration for users, wallets, transfers and products
- OpenAPI document and Swagger UI
- Request logging with correlation IDs
- Prometheus metrics
- CORS and security headers
- Graceful startup and shutdown
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.src.config import get_settings, Settings
from api.src.middleware import RequestLoggingMiddleware, SecurityHeadersMiddleware
from api.src.models import ErrorResponse
from api.src.openapi import OPENAPI_TAGS, OPENAPI_URL, SWAGGER_UI_URL, install_openapi
from api.src.routers import health, home, products, transfers, users, wallets
from shared.logging import configure_logging
from shared.metrics import get_metrics_handler, setup_metrics

logger = structlog.get_logger(__name__)

settings: Settings = get_settings()

# ============================================================================
# Lifespan Management
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager for startup and shutdown events.

    Nothing is pooled or opened: the handlers hold no state. Startup only
    configures logging.
    """
    configure_logging(
        log_level=settings.log_level,
        json_logs=settings.json_logs,
        service_name=settings.app_name,
        environment=settings.environment,
    )

    logger.info(
        "application_started",
        app_name=settings.app_name,
        version=settings.app_version,
        environment=settings.environment,
        database_configured=settings.database_url is not None,
    )

    yield

    logger.info("application_shutdown_complete")

# ============================================================================
# FastAPI Application
# ============================================================================

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Demonstration API exposing users, wallets, transfers and products. "
        "All responses are generated per request; nothing is persisted."
    ),
    docs_url=SWAGGER_UI_URL,
    redoc_url=None,
    openapi_url=OPENAPI_URL,
    openapi_tags=OPENAPI_TAGS,
    lifespan=lifespan,
    debug=settings.debug,
)
install_openapi(app)

# ============================================================================
# Middleware Configuration
# ============================================================================

http_metrics = setup_metrics() if settings.metrics_enabled else None

app.add_middleware(RequestLoggingMiddleware, metrics=http_metrics)

if settings.security_headers_enabled:
    app.add_middleware(SecurityHeadersMiddleware)

# CORS Middleware, added last so it wraps everything else
if settings.cors_enabled:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

# ============================================================================
# Exception Handlers
# ============================================================================

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request decoding errors (path, query and body) as 400."""
    logger.warning(
        "validation_error",
        path=request.url.path,
        errors=exc.errors()
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(
            ErrorResponse(
                detail=exc.errors(), error_code="VALIDATION_ERROR"
            ).model_dump()
        )
    )

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions raised by routing (404, 405)."""
    logger.warning(
        "http_exception",
        path=request.url.path,
        status_code=exc.status_code,
        detail=exc.detail
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(detail=exc.detail).model_dump(exclude_none=True),
        headers=getattr(exc, "headers", None)
    )

@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    logger.error(
        "unexpected_exception",
        path=request.url.path,
        error=str(exc),
        exc_info=True
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(
            detail="Internal server error", error_code="INTERNAL_ERROR"
        ).model_dump()
    )

# ============================================================================
# Metrics Endpoint
# ============================================================================

if http_metrics is not None:
    _render_metrics = get_metrics_handler(http_metrics.registry)

    @app.get("/metrics", include_in_schema=False, response_class=PlainTextResponse)
    async def metrics() -> Response:
        """Prometheus metrics endpoint."""
        return Response(
            content=_render_metrics(),
            media_type=CONTENT_TYPE_LATEST
        )

# ============================================================================
# API Router Registration
# ============================================================================

app.include_router(home.router)
app.include_router(health.router)
app.include_router(users.router)
app.include_router(wallets.router)
app.include_router(transfers.router)
app.include_router(products.router)

# ============================================================================
# Application Entry Point
# ============================================================================

def main() -> None:
    """Run the application with Uvicorn on the configured host and port."""
    run_settings = get_settings()

    configure_logging(
        log_level=run_settings.log_level,
        json_logs=run_settings.json_logs,
        service_name=run_settings.app_name,
        environment=run_settings.environment,
    )

    base_url = f"http://{run_settings.host}:{run_settings.port}"
    logger.info(
        "starting_uvicorn_server",
        url=base_url,
        docs_url=f"{base_url}{SWAGGER_UI_URL}",
        openapi_url=f"{base_url}{OPENAPI_URL}",
        reload=run_settings.debug
    )

    uvicorn.run(
        "api.src.main:app",
        host=run_settings.host,
        port=run_settings.port,
        reload=run_settings.debug,
        log_level=run_settings.log_level.lower(),
        access_log=False,
    )


if __name__ == "__main__":
    main()
