"""Cart Snapshot — immutable point-in-time read of a cart and its JSON form.

Invariants:
    - CartSnapshot is frozen and holds tuples: later store mutations never leak in
    - total_item_count == sum of line quantities; grand_total == sum of price * quantity
    - Totals derived from the same lines tuple, so one snapshot is always coherent
    - cart_snapshot_to_dict produces a JSON-safe dict (no dataclasses, no tuples)

Design Decisions:
    - Extracted from cart_store.py: the view layer depends on snapshots only,
      never on CartStore internals
    - Totals are properties, not fields: impossible to construct an inconsistent snapshot
"""

from dataclasses import dataclass

from shopcart.core.product import Product


@dataclass(frozen=True)
class LineSnapshot:
    """One cart line as seen by the view."""
    product: Product
    quantity: int

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> int:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class CartSnapshot:
    """Ordered lines plus derived totals."""
    lines: tuple[LineSnapshot, ...] = ()

    @property
    def total_item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def grand_total(self) -> int:
        return sum(line.line_total for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines


def cart_snapshot_to_dict(snapshot: CartSnapshot) -> dict:
    """Serialize a CartSnapshot to a JSON-safe dict. Pure, no IO."""
    return {
        "lines": [
            {
                **line.product.to_dict(),
                "quantity": line.quantity,
                "line_total": line.line_total,
            }
            for line in snapshot.lines
        ],
        "total_item_count": snapshot.total_item_count,
        "grand_total": snapshot.grand_total,
    }
