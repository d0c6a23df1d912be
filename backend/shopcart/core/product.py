"""Product — immutable catalog record and its construction from raw mappings.

Invariants:
    - Product is frozen: a cart line's snapshot can never change through the catalog
    - id is always canonical: normalized in __post_init__, whatever the constructor got
    - image may be None; the placeholder is substituted by the projection, never here
    - product_from_mapping tolerates absent optional fields (image, category)

Design Decisions:
    - Frozen dataclass over dict: the store copies snapshots by value, no aliasing
    - Required fields (id, name, price) are checked once, at construction — the only
      place a malformed record can surface, as InvalidProductError
    - Unknown keys are ignored: catalog records may carry display-only extras
"""

from collections.abc import Mapping
from dataclasses import dataclass, asdict

from shopcart.core.domain_types import Money, ProductId, normalize_product_id
from shopcart.core.errors import ErrorContext, InvalidProductError


@dataclass(frozen=True)
class Product:
    """One sellable item — pure value object, no IO."""

    id: ProductId
    name: str
    price: Money
    image: str | None = None
    category: str = ""

    def __post_init__(self):
        # frozen: bypass __setattr__ to store the canonical id
        object.__setattr__(self, "id", normalize_product_id(self.id))

    def to_dict(self) -> dict:
        """JSON-safe representation (image stays None when absent)."""
        return asdict(self)


def product_from_mapping(data: Mapping) -> Product:
    """Build a Product from a raw record. Raises InvalidProductError on bad required fields."""
    raw_id = data.get("id")
    if raw_id is None or isinstance(raw_id, bool) or str(raw_id).strip() == "":
        raise InvalidProductError("Product record has no id", "id")
    product_id = normalize_product_id(raw_id)
    context = ErrorContext(product_id=product_id)

    name = data.get("name")
    if not isinstance(name, str) or not name.strip():
        raise InvalidProductError(
            f"Product '{product_id}' has no name", "name", context,
        )

    price = data.get("price")
    if isinstance(price, bool) or not isinstance(price, int) or price < 0:
        raise InvalidProductError(
            f"Product '{product_id}' price must be a non-negative integer",
            "price", context,
        )

    image = data.get("image") or None
    return Product(
        id=product_id,
        name=name,
        price=Money(price),
        image=image,
        category=data.get("category") or "",
    )
