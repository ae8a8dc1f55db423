"""
Transfer router.

A transfer is acknowledged by returning the submitted body. Balances are
never read or changed, wallet ids are not checked, and idempotency keys are
not deduplicated.
"""

import structlog
from fastapi import APIRouter, status

from api.src.models import ErrorResponse, TransferRequest

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/transfers",
    tags=["Transfers"],
)


@router.post(
    "",
    response_model=TransferRequest,
    status_code=status.HTTP_200_OK,
    summary="Create Transfer",
    responses={
        200: {"description": "Transfer completed successfully"},
        400: {"model": ErrorResponse, "description": "Invalid transfer request"}
    }
)
async def create_transfer(payload: TransferRequest) -> TransferRequest:
    """Accept a transfer and echo it back unchanged."""
    logger.info(
        "transfer_accepted",
        from_wallet_id=payload.from_wallet_id,
        to_wallet_id=payload.to_wallet_id,
        amount=payload.amount,
        has_idempotency_key=payload.idempotency_key is not None,
    )
    return payload
