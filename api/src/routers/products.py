"""
Product catalog router.

Mirrors the user router: a fixed two-item listing, creation that echoes the
request with a fixed id, and lookups that fabricate a product for any id.
"""

from datetime import datetime, timezone
from typing import List

import structlog
from fastapi import APIRouter, Depends, Path, status

from api.src.dependencies import get_pagination_params
from api.src.models import CreateProductRequest, ErrorResponse, PaginationParams, Product

logger = structlog.get_logger(__name__)

router = APIRouter(
    prefix="/products",
    tags=["Products"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request data"}
    }
)

CREATED_PRODUCT_ID = 1


@router.get(
    "",
    response_model=List[Product],
    summary="List Products",
    responses={
        200: {"description": "List of products"},
        400: {"model": ErrorResponse, "description": "Invalid parameters"}
    }
)
async def get_products(
    pagination: PaginationParams = Depends(get_pagination_params),
) -> List[Product]:
    """List products. Pagination parameters are accepted and ignored."""
    logger.debug("products_listed", page=pagination.page, limit=pagination.limit)
    now = datetime.now(timezone.utc)
    return [
        Product(
            id=1,
            name="Laptop",
            description="High-performance laptop",
            price=999.99,
            category="Electronics",
            created_at=now,
        ),
        Product(
            id=2,
            name="Mouse",
            description="Wireless mouse",
            price=29.99,
            category="Electronics",
            created_at=now,
        ),
    ]


@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    summary="Create Product",
    responses={
        201: {"description": "Product created successfully"}
    }
)
async def create_product(payload: CreateProductRequest) -> Product:
    """Create a product by echoing the request with a fixed id."""
    logger.info("product_created", product_id=CREATED_PRODUCT_ID, category=payload.category)
    return Product(
        id=CREATED_PRODUCT_ID,
        name=payload.name,
        description=payload.description,
        price=payload.price,
        category=payload.category,
        created_at=datetime.now(timezone.utc),
    )


@router.get(
    "/{id}",
    response_model=Product,
    summary="Get Product",
    responses={
        200: {"description": "Product details"}
    }
)
async def get_product_by_id(
    id: int = Path(..., description="Product ID"),
) -> Product:
    """Return a sample product carrying the requested id."""
    return Product(
        id=id,
        name="Sample Product",
        description="Sample product description",
        price=49.99,
        category="General",
        created_at=datetime.now(timezone.utc),
    )
