"""
Shared schemas that are not tied to a single resource.

Provides:
- Health check response
- Pagination query parameters (accepted by list endpoints, never applied)
- Error response body produced by the exception handlers
- Template context for the HTML home page
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Health check response schema."""
    status: str = Field(
        ...,
        description="Status of the service"
    )
    timestamp: str = Field(
        ...,
        description="Timestamp of the health check (RFC 3339)"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "status": "healthy",
                "timestamp": "2024-01-15T10:30:00.000000+00:00"
            }
        }
    }


class PaginationParams(BaseModel):
    """Pagination parameters for list endpoints."""
    page: Optional[int] = Field(
        None,
        description="Page number for pagination"
    )
    limit: Optional[int] = Field(
        None,
        description="Number of items per page"
    )

    model_config = {"frozen": True}


class ErrorResponse(BaseModel):
    """Error response schema."""
    detail: Union[str, List[Any]] = Field(
        ...,
        description="Error message, or the list of decoding errors"
    )
    error_code: Optional[str] = Field(
        None,
        description="Machine-readable error code"
    )

    model_config = {
        "json_schema_extra": {
            "example": {
                "detail": "Invalid request data",
                "error_code": "VALIDATION_ERROR"
            }
        }
    }


class HomePageContext(BaseModel):
    """Values rendered into the home page template."""
    version: str
    uptime: str
    server_time: str

    model_config = {"frozen": True}
