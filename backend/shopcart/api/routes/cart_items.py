"""Cart Items — add / remove / adjust / clear, plus the render view and toasts.

Invariants:
    - Every mutation responds with the snapshot taken right after it (synchronous)
    - Lookup misses (unknown product id, no such line) are no-ops, still 200
    - Only add and remove enqueue toasts; adjust above zero and clear are silent
    - Unknown cart id → 404

Design Decisions:
    - Mutation endpoints return the snapshot so the view never needs a second read
    - /view runs the pure projection with display settings from config
    - /notifications drains the outbox: each toast is delivered at most once
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from shopcart.config import Settings, get_settings
from shopcart.core.cart_projection import project_cart
from shopcart.core.domain_types import CartId, normalize_product_id
from shopcart.core.product import product_from_mapping
from shopcart.infrastructure.cart_registry import CartRegistry, get_registry
from shopcart.schemas.cart import (
    AddItemRequest,
    AdjustQuantityRequest,
    CartResponse,
    CartViewResponse,
    NotificationListResponse,
    NotificationResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/carts/{cart_id}", tags=["cart-items"])


@router.post("/items", response_model=CartResponse)
async def add_item(
    cart_id: UUID,
    body: AddItemRequest,
    registry: CartRegistry = Depends(get_registry),
):
    """Add one unit by catalog id or full product record (merges into an existing line)."""
    session = registry.get(CartId(cart_id))
    if body.product is not None:
        target = product_from_mapping(body.product.model_dump())
        product_id = target.id
    else:
        target = product_id = normalize_product_id(body.product_id)
    if not session.store.add(target):
        logger.info(
            "Add was a no-op: unknown product",
            extra={"cart_id": str(cart_id), "product_id": product_id},
        )
    return CartResponse.from_snapshot(session.id, session.store.snapshot())


@router.delete("/items/{product_id}", response_model=CartResponse)
async def remove_item(
    cart_id: UUID,
    product_id: str,
    registry: CartRegistry = Depends(get_registry),
):
    """Remove a line entirely. Unknown product id leaves the cart unchanged."""
    session = registry.get(CartId(cart_id))
    session.store.remove(product_id)
    return CartResponse.from_snapshot(session.id, session.store.snapshot())


@router.patch("/items/{product_id}", response_model=CartResponse)
async def adjust_item_quantity(
    cart_id: UUID,
    product_id: str,
    body: AdjustQuantityRequest,
    registry: CartRegistry = Depends(get_registry),
):
    """Step a line's quantity by delta; reaching zero or below removes the line."""
    session = registry.get(CartId(cart_id))
    changed = session.store.adjust_quantity(product_id, body.delta)
    logger.debug(
        "Quantity step applied" if changed else "Quantity step ignored",
        extra={"cart_id": str(cart_id), "product_id": product_id, "delta": body.delta},
    )
    return CartResponse.from_snapshot(session.id, session.store.snapshot())


@router.delete("/items", response_model=CartResponse)
async def clear_items(
    cart_id: UUID, registry: CartRegistry = Depends(get_registry),
):
    """Empty the cart."""
    session = registry.get(CartId(cart_id))
    session.store.clear()
    return CartResponse.from_snapshot(session.id, session.store.snapshot())


@router.get("/view", response_model=CartViewResponse)
async def get_cart_view(
    cart_id: UUID,
    registry: CartRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings),
):
    """Render model for the cart panel, item-count badge and total text."""
    session = registry.get(CartId(cart_id))
    model = project_cart(
        session.store.snapshot(),
        currency_symbol=settings.currency_symbol,
        image_placeholder=settings.image_placeholder_url,
    )
    return CartViewResponse.from_render_model(session.id, model)


@router.get("/notifications", response_model=NotificationListResponse)
async def drain_notifications(
    cart_id: UUID, registry: CartRegistry = Depends(get_registry),
):
    """Pending toasts, oldest first. Expired toasts are dropped, delivered ones forgotten."""
    session = registry.get(CartId(cart_id))
    return NotificationListResponse(
        notifications=[
            NotificationResponse.from_notification(n)
            for n in session.outbox.drain()
        ],
    )
