"""Cart Schemas — Pydantic models for cart mutations, snapshots, views and toasts.

Invariants:
    - AddItemRequest carries exactly one of product_id / product
    - AdjustQuantityRequest.delta is a non-zero integer
    - CartResponse totals always come from one CartSnapshot (never recomputed here)

Design Decisions:
    - Responses built from core snapshots via from_* classmethods: routes stay thin
    - Literal severity over str: Pydantic validates the toast tag natively
"""

from dataclasses import asdict
from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, Field, field_validator, model_validator

from shopcart.core.cart_projection import CartRenderModel
from shopcart.core.cart_snapshot import CartSnapshot, cart_snapshot_to_dict
from shopcart.infrastructure.notification_outbox import Notification
from shopcart.schemas.catalog import ProductPayload


# --- Requests -----------------------------------------------------------------

class AddItemRequest(BaseModel):
    """Add one unit — by catalog id or by full product record."""
    product_id: int | str | None = None
    product: ProductPayload | None = None

    @field_validator("product_id", mode="before")
    @classmethod
    def reject_bool_id(cls, v):
        if isinstance(v, bool):
            raise ValueError("product_id must be an int or a string")
        return v

    @model_validator(mode="after")
    def exactly_one_source(self):
        if (self.product_id is None) == (self.product is None):
            raise ValueError("provide exactly one of product_id or product")
        return self


class AdjustQuantityRequest(BaseModel):
    """Quantity stepper: +1 / -1 from the view, any non-zero step accepted."""
    delta: int = Field(ge=-1_000, le=1_000)

    @field_validator("delta")
    @classmethod
    def non_zero(cls, v: int) -> int:
        if v == 0:
            raise ValueError("delta cannot be 0")
        return v


# --- Snapshot responses -------------------------------------------------------

class CartLineResponse(BaseModel):
    """One cart line: product snapshot fields plus quantity."""
    id: str
    name: str
    price: int
    image: str | None = None
    category: str = ""
    quantity: int = Field(ge=1)
    line_total: int


class CartResponse(BaseModel):
    """Coherent cart snapshot for one cart session."""
    cart_id: UUID
    lines: list[CartLineResponse]
    total_item_count: int
    grand_total: int

    @classmethod
    def from_snapshot(cls, cart_id: UUID, snapshot: CartSnapshot) -> "CartResponse":
        return cls(cart_id=cart_id, **cart_snapshot_to_dict(snapshot))


# --- View responses -----------------------------------------------------------

class CartRowResponse(BaseModel):
    product_id: str
    name: str
    image_url: str
    unit_price_text: str
    quantity: int
    line_total_text: str


class CartViewResponse(BaseModel):
    """Render model: what the cart panel, badge and total text display."""
    cart_id: UUID
    rows: list[CartRowResponse]
    badge_count: int
    total_text: str
    empty_message: str | None = None

    @classmethod
    def from_render_model(
        cls, cart_id: UUID, model: CartRenderModel,
    ) -> "CartViewResponse":
        return cls(
            cart_id=cart_id,
            rows=[CartRowResponse(**asdict(row)) for row in model.rows],
            badge_count=model.badge_count,
            total_text=model.total_text,
            empty_message=model.empty_message,
        )


# --- Toasts -------------------------------------------------------------------

class NotificationResponse(BaseModel):
    message: str
    severity: Literal["success", "error"]
    created_at: datetime
    expires_at: datetime

    @classmethod
    def from_notification(cls, n: Notification) -> "NotificationResponse":
        return cls(
            message=n.message,
            severity=n.severity.value,
            created_at=n.created_at,
            expires_at=n.expires_at,
        )


class NotificationListResponse(BaseModel):
    notifications: list[NotificationResponse]
