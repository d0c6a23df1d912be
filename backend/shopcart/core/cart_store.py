"""Cart Store — sole owner and mutator of one cart's line items.

Invariants:
    - At most one CartLine per product id (repeat adds merge into the existing line)
    - Lines keep insertion order; a repeat add never moves a line
    - No line with quantity <= 0 ever exists (adjust to <= 0 removes the line)
    - Totals are derived on read, never stored
    - Lookup misses (unknown id in catalog or cart) are silent no-ops — nothing raises
    - Only add and remove notify; in-place quantity changes are silent

Design Decisions:
    - Constructed instance, not module state: one store per cart session, injected
      into the shell (multiple independent carts in tests)
    - Line holds a frozen Product copied at first add: later catalog changes never
      alter lines already in the cart
    - Mutations return bool (changed or not) so the shell can log without re-reading
    - adjust_quantity delegates to remove() when the floor is crossed, so the
      removal notification is identical on both paths
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from shopcart.core.cart_snapshot import CartSnapshot, LineSnapshot
from shopcart.core.domain_types import NotificationSeverity, ProductId, normalize_product_id
from shopcart.core.errors import InvalidProductError
from shopcart.core.product import Product, product_from_mapping
from shopcart.core.repository_protocols import (
    CatalogLike, NotificationSink, NullNotificationSink,
)

logger = logging.getLogger(__name__)

MSG_PRODUCT_ADDED = "Product added to cart!"
MSG_PRODUCT_REMOVED = "Product removed from cart!"


@dataclass
class CartLine:
    """One product in the cart with its quantity. Mutated only by CartStore."""
    product: Product
    quantity: int = 1

    @property
    def line_total(self) -> int:
        return self.product.price * self.quantity


class CartStore:
    """Ordered, deduplicated cart lines with add/remove/adjust/clear and snapshots."""

    def __init__(
        self,
        catalog: CatalogLike,
        notifier: NotificationSink | None = None,
    ):
        self._catalog = catalog
        self._notifier = notifier if notifier is not None else NullNotificationSink()
        # dict keeps insertion order: position of a line is fixed at first add
        self._lines: dict[ProductId, CartLine] = {}

    # --- Mutations -------------------------------------------------------------

    def add(self, product_or_id: Product | Mapping | str | int) -> bool:
        """Add one unit. Accepts a Product, a raw product mapping, or an id.

        Returns False (and does nothing) when the id is unknown to the catalog
        or the mapping is not a usable product record.
        """
        product = self._resolve(product_or_id)
        if product is None:
            logger.debug(
                "Add ignored: product not resolvable",
                extra={"product_id": _describe(product_or_id)},
            )
            return False

        line = self._lines.get(product.id)
        if line is not None:
            line.quantity += 1
        else:
            self._lines[product.id] = CartLine(product=product, quantity=1)
        logger.debug(
            "Product added",
            extra={"product_id": product.id, "quantity": self._lines[product.id].quantity},
        )
        self._notifier.notify(MSG_PRODUCT_ADDED, NotificationSeverity.SUCCESS)
        return True

    def remove(self, product_id: object) -> bool:
        """Delete the line for this id. Unknown id is a no-op (no notification)."""
        key = _key(product_id)
        if key is None or key not in self._lines:
            logger.debug("Remove ignored: no line", extra={"product_id": key})
            return False
        del self._lines[key]
        logger.debug("Product removed", extra={"product_id": key})
        self._notifier.notify(MSG_PRODUCT_REMOVED, NotificationSeverity.SUCCESS)
        return True

    def adjust_quantity(self, product_id: object, delta: int) -> bool:
        """Add delta (may be negative) to a line's quantity; <= 0 removes the line."""
        key = _key(product_id)
        line = self._lines.get(key) if key is not None else None
        if line is None:
            logger.debug("Adjust ignored: no line", extra={"product_id": key})
            return False

        new_quantity = line.quantity + delta
        if new_quantity <= 0:
            return self.remove(key)
        line.quantity = new_quantity
        logger.debug(
            "Quantity adjusted",
            extra={"product_id": key, "quantity": new_quantity},
        )
        return True

    def clear(self) -> bool:
        """Drop every line. Silent; returns False when already empty."""
        if not self._lines:
            return False
        self._lines.clear()
        logger.debug("Cart cleared")
        return True

    # --- Reads -----------------------------------------------------------------

    def snapshot(self) -> CartSnapshot:
        """Point-in-time, immutable view of lines and derived totals."""
        lines = tuple(
            LineSnapshot(product=line.product, quantity=line.quantity)
            for line in self._lines.values()
        )
        return CartSnapshot(lines=lines)

    def line_for(self, product_id: object) -> CartLine | None:
        key = _key(product_id)
        return self._lines.get(key) if key is not None else None

    @property
    def total_item_count(self) -> int:
        return sum(line.quantity for line in self._lines.values())

    @property
    def grand_total(self) -> int:
        return sum(line.line_total for line in self._lines.values())

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_id: object) -> bool:
        return self.line_for(product_id) is not None

    # --- Internals -------------------------------------------------------------

    def _resolve(self, product_or_id: object) -> Product | None:
        if isinstance(product_or_id, Product):
            return product_or_id
        if isinstance(product_or_id, Mapping):
            try:
                return product_from_mapping(product_or_id)
            except InvalidProductError as e:
                logger.warning(
                    f"Add ignored: {e.message}",
                    extra={"error_code": e.code},
                )
                return None
        return self._catalog.find_by_id(product_or_id)


def _key(product_id: object) -> ProductId | None:
    if product_id is None or isinstance(product_id, bool):
        return None
    return normalize_product_id(product_id)


def _describe(value: object) -> str:
    if isinstance(value, Mapping):
        return str(value.get("id"))
    return str(value)
