"""Cart Lifecycle — create, read and discard in-memory cart sessions.

Invariants:
    - A new cart is always empty
    - GET returns one coherent snapshot (lines + totals from the same read)
    - Unknown cart id → 404 (ResourceNotFoundError via the global handler)

Design Decisions:
    - Carts live in the CartRegistry singleton, not a DB: contents must not
      survive a reload
    - DELETE returns 204 and discards synchronously: nothing to clean up elsewhere
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from shopcart.core.domain_types import CartId
from shopcart.infrastructure.cart_registry import CartRegistry, get_registry
from shopcart.schemas.cart import CartResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/carts", tags=["carts"])


@router.post(
    "", response_model=CartResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_cart(registry: CartRegistry = Depends(get_registry)):
    """Start a new, empty cart session."""
    session = registry.create()
    return CartResponse.from_snapshot(session.id, session.store.snapshot())


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(
    cart_id: UUID, registry: CartRegistry = Depends(get_registry),
):
    """Current snapshot of a cart."""
    session = registry.get(CartId(cart_id))
    return CartResponse.from_snapshot(session.id, session.store.snapshot())


@router.delete("/{cart_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_cart(
    cart_id: UUID, registry: CartRegistry = Depends(get_registry),
):
    """Discard a cart session and everything in it."""
    registry.discard(CartId(cart_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
