"""Wallet router."""

from datetime import datetime, timezone
from typing import List

from fastapi import APIRouter, Path

from api.src.models import ErrorResponse, Wallet

router = APIRouter(
    prefix="/wallets",
    tags=["Wallets"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request data"}
    }
)

DEFAULT_BALANCE = 100.0
DEFAULT_CURRENCY = "USD"


@router.get(
    "/{user_id}",
    response_model=List[Wallet],
    summary="List User Wallets",
    responses={
        200: {"description": "User's wallets"}
    }
)
async def get_user_wallets(
    user_id: int = Path(..., description="User ID"),
) -> List[Wallet]:
    """Return a single wallet owned by ``user_id``."""
    return [
        Wallet(
            id=1,
            user_id=user_id,
            balance=DEFAULT_BALANCE,
            currency=DEFAULT_CURRENCY,
            created_at=datetime.now(timezone.utc),
        ),
    ]
