"""Catalog Routes — read-only product listing and lookup.

Invariants:
    - No mutation endpoints: the catalog is owned by the host, read by carts
    - Unknown product id → 404 with the standard error envelope
"""

import logging

from fastapi import APIRouter, Depends

from shopcart.core.errors import ErrorContext, ResourceNotFoundError
from shopcart.infrastructure.cart_registry import CartRegistry, get_registry
from shopcart.schemas.catalog import ProductListResponse, ProductResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("", response_model=ProductListResponse)
async def list_products(registry: CartRegistry = Depends(get_registry)):
    """All products in catalog order."""
    return ProductListResponse(
        products=[ProductResponse.from_product(p) for p in registry.catalog],
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: str, registry: CartRegistry = Depends(get_registry),
):
    """One product by id."""
    product = registry.catalog.find_by_id(product_id)
    if product is None:
        raise ResourceNotFoundError(
            "Product", product_id, ErrorContext(product_id=product_id),
        )
    return ProductResponse.from_product(product)
