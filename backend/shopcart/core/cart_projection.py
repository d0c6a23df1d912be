"""Cart Projection — pure mapping from a CartSnapshot to the render model the view draws.

Invariants:
    - Input is a CartSnapshot only; never reads CartStore internals
    - Missing image replaced by the placeholder here (the store leaves it None)
    - badge_count == snapshot.total_item_count; total_text formats snapshot.grand_total
    - Empty cart yields no rows and the empty-state message

Design Decisions:
    - Separated from the store so the store has no rendering dependency and is
      testable headlessly
    - Prices formatted in whole units with Indian digit grouping (1,50,000):
      the storefront sells in INR with no fractional part
"""

from dataclasses import dataclass

from shopcart.core.cart_snapshot import CartSnapshot, LineSnapshot

EMPTY_CART_MESSAGE = "Your cart is empty"
DEFAULT_CURRENCY_SYMBOL = "₹"
DEFAULT_IMAGE_PLACEHOLDER = "/static/img/placeholder.png"


@dataclass(frozen=True)
class CartRowModel:
    """Everything one rendered cart row needs — stepper and remove act on product_id."""
    product_id: str
    name: str
    image_url: str
    unit_price_text: str
    quantity: int
    line_total_text: str


@dataclass(frozen=True)
class CartRenderModel:
    """Whole cart panel: rows, item-count badge, total text, empty-state message."""
    rows: tuple[CartRowModel, ...]
    badge_count: int
    total_text: str
    empty_message: str | None


def format_price(
    amount: int, currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
) -> str:
    """Whole-unit price with Indian grouping: 3500 -> "₹3,500", 150000 -> "₹1,50,000"."""
    sign = "-" if amount < 0 else ""
    digits = str(abs(int(amount)))
    if len(digits) > 3:
        head, tail = digits[:-3], digits[-3:]
        groups = []
        while len(head) > 2:
            groups.insert(0, head[-2:])
            head = head[:-2]
        if head:
            groups.insert(0, head)
        digits = ",".join(groups) + "," + tail
    return f"{sign}{currency_symbol}{digits}"


def _project_line(
    line: LineSnapshot, currency_symbol: str, image_placeholder: str,
) -> CartRowModel:
    product = line.product
    return CartRowModel(
        product_id=product.id,
        name=product.name,
        image_url=product.image or image_placeholder,
        unit_price_text=format_price(product.price, currency_symbol),
        quantity=line.quantity,
        line_total_text=format_price(line.line_total, currency_symbol),
    )


def project_cart(
    snapshot: CartSnapshot,
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL,
    image_placeholder: str = DEFAULT_IMAGE_PLACEHOLDER,
) -> CartRenderModel:
    """Build the render model for a snapshot. Pure, deterministic, no IO."""
    rows = tuple(
        _project_line(line, currency_symbol, image_placeholder)
        for line in snapshot.lines
    )
    return CartRenderModel(
        rows=rows,
        badge_count=snapshot.total_item_count,
        total_text=format_price(snapshot.grand_total, currency_symbol),
        empty_message=EMPTY_CART_MESSAGE if snapshot.is_empty else None,
    )
