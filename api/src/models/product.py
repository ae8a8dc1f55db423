"""Product catalog schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class Product(BaseModel):
    """Product response schema."""
    id: int = Field(
        ...,
        description="Unique identifier for the product"
    )
    name: str = Field(
        ...,
        description="Product name"
    )
    description: str = Field(
        ...,
        description="Product description"
    )
    price: float = Field(
        ...,
        description="Product price"
    )
    category: str = Field(
        ...,
        description="Product category"
    )
    created_at: datetime = Field(
        ...,
        description="Product creation timestamp"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "id": 1,
                "name": "Laptop",
                "description": "High-performance laptop",
                "price": 999.99,
                "category": "Electronics",
                "created_at": "2024-01-15T10:30:00Z"
            }
        }
    }


class CreateProductRequest(BaseModel):
    """Create product request schema."""
    name: str = Field(
        ...,
        description="Product name"
    )
    description: str = Field(
        ...,
        description="Product description"
    )
    price: float = Field(
        ...,
        description="Product price"
    )
    category: str = Field(
        ...,
        description="Product category"
    )

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "name": "Laptop",
                "description": "High-performance laptop",
                "price": 999.99,
                "category": "Electronics"
            }
        }
    }
