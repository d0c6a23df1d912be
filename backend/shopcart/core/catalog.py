"""Product Catalog — immutable, ordered, read-only lookup source for the cart.

Invariants:
    - Products held in a tuple: no mutation operations exist
    - Ids unique within the catalog (duplicate ids rejected at construction)
    - find_by_id accepts int or str forms of an id and never raises for a miss
    - Iteration yields products in catalog order

Design Decisions:
    - One canonical schema (Product) and one matching rule (normalized str, strict ==)
    - Index dict built once at construction: O(1) lookup, order kept by the tuple
    - DEFAULT_PRODUCTS lives here so the shell and tests share one seed catalog
"""

from collections.abc import Iterable, Iterator, Mapping

from shopcart.core.domain_types import ProductId, normalize_product_id
from shopcart.core.errors import ErrorContext, InvalidProductError
from shopcart.core.product import Product, product_from_mapping


class ProductCatalog:
    """Ordered product collection queryable by id. Owned by the host, read by the cart."""

    def __init__(self, products: Iterable[Product] = ()):
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[ProductId, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise InvalidProductError(
                    f"Duplicate product id '{product.id}' in catalog", "id",
                    ErrorContext(product_id=product.id),
                )
            self._by_id[product.id] = product

    @classmethod
    def from_records(cls, records: Iterable[Mapping]) -> "ProductCatalog":
        """Build a catalog from raw dict records, normalizing ids at this boundary."""
        return cls(product_from_mapping(r) for r in records)

    def find_by_id(self, product_id: object) -> Product | None:
        """Product for this id (3 and "3" are the same id), or None."""
        if product_id is None or isinstance(product_id, bool):
            return None
        return self._by_id.get(normalize_product_id(product_id))

    def __iter__(self) -> Iterator[Product]:
        return iter(self._products)

    def __len__(self) -> int:
        return len(self._products)

    def __contains__(self, product_id: object) -> bool:
        return self.find_by_id(product_id) is not None


# ─── Seed Catalog ────────────────────────────────────────────────

DEFAULT_PRODUCTS: tuple[dict, ...] = (
    {
        "id": 1,
        "name": "Handwoven Silk Saree",
        "price": 3500,
        "image": "https://images.unsplash.com/photo-1594736797933-d0401ba2fe65?auto=format&fit=crop&w=500&q=80",
        "category": "sarees",
    },
    {
        "id": 2,
        "name": "Traditional Cotton Dhoti",
        "price": 800,
        "image": "https://images.unsplash.com/photo-1620012253295-c15cc3e65df4?auto=format&fit=crop&w=500&q=80",
        "category": "dhotis",
    },
    {
        "id": 3,
        "name": "Handloom Kurta Set",
        "price": 1200,
        "image": "https://images.unsplash.com/photo-1578632292335-df3abbb0d586?auto=format&fit=crop&w=500&q=80",
        "category": "kurtas",
    },
)


def default_catalog() -> ProductCatalog:
    """The storefront's seed catalog."""
    return ProductCatalog.from_records(DEFAULT_PRODUCTS)
