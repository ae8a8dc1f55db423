"""
Wallet and transfer schemas.

TransferRequest is both the request body and the response body of
POST /transfers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class Wallet(BaseModel):
    """Wallet response schema."""
    id: int = Field(
        ...,
        description="Unique identifier for the wallet"
    )
    user_id: int = Field(
        ...,
        description="Associated user ID"
    )
    balance: float = Field(
        ...,
        description="Current balance"
    )
    currency: str = Field(
        ...,
        description="Currency code (e.g., USD, EUR)"
    )
    created_at: datetime = Field(
        ...,
        description="Wallet creation timestamp"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "id": 1,
                "user_id": 1,
                "balance": 100.0,
                "currency": "USD",
                "created_at": "2024-01-15T10:30:00Z"
            }
        }
    }


class TransferRequest(BaseModel):
    """Transfer request schema.

    Fields are strict: the body is echoed back, so numeric strings are
    rejected rather than coerced.
    """
    from_wallet_id: int = Field(
        ...,
        strict=True,
        description="Source wallet ID"
    )
    to_wallet_id: int = Field(
        ...,
        strict=True,
        description="Destination wallet ID"
    )
    amount: float = Field(
        ...,
        strict=True,
        description="Amount to transfer"
    )
    # Carried through untouched; duplicate keys are not detected.
    idempotency_key: Optional[str] = Field(
        None,
        strict=True,
        description="Optional idempotency key"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "from_wallet_id": 1,
                "to_wallet_id": 2,
                "amount": 25.5,
                "idempotency_key": "3f1c2a9e-7b6d-4e2f-9c1a-8d5e6f7a8b9c"
            }
        }
    }
