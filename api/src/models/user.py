"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class User(BaseModel):
    """User information response schema."""
    id: int = Field(
        ...,
        description="Unique identifier for the user"
    )
    email: str = Field(
        ...,
        description="User's email address"
    )
    name: str = Field(
        ...,
        description="User's full name"
    )
    created_at: datetime = Field(
        ...,
        description="Account creation timestamp"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "id": 1,
                "email": "john@example.com",
                "name": "John Doe",
                "created_at": "2024-01-15T10:30:00Z"
            }
        }
    }


class CreateUserRequest(BaseModel):
    """Create user request schema."""
    email: str = Field(
        ...,
        description="User's email address"
    )
    name: str = Field(
        ...,
        description="User's full name"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "email": "john@example.com",
                "name": "John Doe"
            }
        }
    }
