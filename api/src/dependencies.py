"""
FastAPI dependency injection for shared request inputs.

Provides injectable dependencies for:
- Application settings
- Pagination query parameters

All dependencies use FastAPI's dependency injection system and are designed
to be composable and overridable in tests via ``app.dependency_overrides``.
"""

from typing import Optional

from fastapi import Query

from api.src.config import get_settings, Settings
from api.src.models.common import PaginationParams


def get_app_settings() -> Settings:
    """Expose the cached settings as a dependency."""
    return get_settings()


async def get_pagination_params(
    page: Optional[int] = Query(None, description="Page number for pagination"),
    limit: Optional[int] = Query(None, description="Number of items per page"),
) -> PaginationParams:
    """
    Get pagination parameters from query string.

    Values are only type-coerced: negative, zero and oversized values are
    passed through as given. A value that cannot be read as an integer is
    rejected by FastAPI before the handler runs.

    Args:
        page: Page number
        limit: Number of items per page

    Returns:
        Pagination parameters

    Example:
        @router.get("/items")
        async def list_items(
            pagination: PaginationParams = Depends(get_pagination_params)
        ):
            ...
    """
    return PaginationParams(page=page, limit=limit)
