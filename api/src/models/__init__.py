"""Data models for the FastAPI service.

This package contains the Pydantic request/response schemas. The same
models drive request decoding, response serialization and the generated
OpenAPI document.
"""

from api.src.models.common import (
    ErrorResponse,
    HealthResponse,
    HomePageContext,
    PaginationParams,
)
from api.src.models.product import CreateProductRequest, Product
from api.src.models.user import CreateUserRequest, User
from api.src.models.wallet import TransferRequest, Wallet

# Every schema published under components/schemas, in documentation order.
DOCUMENTED_SCHEMAS = (
    HealthResponse,
    User,
    CreateUserRequest,
    Wallet,
    TransferRequest,
    Product,
    CreateProductRequest,
    PaginationParams,
    ErrorResponse,
)

__all__ = [
    "CreateProductRequest",
    "CreateUserRequest",
    "DOCUMENTED_SCHEMAS",
    "ErrorResponse",
    "HealthResponse",
    "HomePageContext",
    "PaginationParams",
    "Product",
    "TransferRequest",
    "User",
    "Wallet",
]
