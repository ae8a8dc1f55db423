"""
Health check router.

Returns liveness status without checking dependencies; there are none.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, status

from api.src.models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    status_code=status.HTTP_200_OK,
    summary="Health Check",
    responses={
        200: {"description": "Health check successful"}
    }
)
async def health_check() -> HealthResponse:
    """
    Health check endpoint.

    Use for container health checks. The timestamp is generated fresh on
    every call.
    """
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc).isoformat(),
    )
