"""
User router.

Every response is fabricated: list and lookup return fixed records, and
creation echoes the request with a fixed id. Nothing is stored.
"""

from datetime import datetime, timezone
from typing import List

import structlog
from fastapi import APIRouter, Depends, Path, status

from api.src.dependencies import get_pagination_params
from api.src.models import CreateUserRequest, ErrorResponse, PaginationParams, User

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request data"}
    }
)

# Assigned to every created user; ids are not allocated.
CREATED_USER_ID = 1


@router.get(
    "",
    response_model=List[User],
    summary="List Users",
    responses={
        200: {"description": "List of users"},
        400: {"model": ErrorResponse, "description": "Invalid parameters"}
    }
)
async def get_users(
    pagination: PaginationParams = Depends(get_pagination_params),
) -> List[User]:
    """
    List users.

    ``page`` and ``limit`` are accepted and ignored; the same two users are
    always returned.
    """
    logger.debug("users_listed", page=pagination.page, limit=pagination.limit)
    now = datetime.now(timezone.utc)
    return [
        User(id=1, email="john@example.com", name="John Doe", created_at=now),
        User(id=2, email="jane@example.com", name="Jane Smith", created_at=now),
    ]


@router.post(
    "",
    response_model=User,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    responses={
        201: {"description": "User created successfully"}
    }
)
async def create_user(payload: CreateUserRequest) -> User:
    """Create a user by echoing the request with a fixed id."""
    logger.info("user_created", user_id=CREATED_USER_ID)
    return User(
        id=CREATED_USER_ID,
        email=payload.email,
        name=payload.name,
        created_at=datetime.now(timezone.utc),
    )


@router.get(
    "/{id}",
    response_model=User,
    summary="Get User",
    responses={
        200: {"description": "User details"}
    }
)
async def get_user_by_id(
    id: int = Path(..., description="User ID"),
) -> User:
    """Return a user carrying the requested id. Unknown ids are never rejected."""
    return User(
        id=id,
        email="test@example.com",
        name="Test User",
        created_at=datetime.now(timezone.utc),
    )
