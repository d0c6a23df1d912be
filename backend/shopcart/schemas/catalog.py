"""Catalog Schemas — Pydantic models for product payloads and responses.

Invariants:
    - ProductPayload.id: int or non-empty str, never bool
    - ProductPayload.price: non-negative integer (smallest currency unit)
    - ProductPayload.image optional; absence is preserved, not defaulted

Design Decisions:
    - ProductPayload mirrors core Product field names so model_dump() feeds
      product_from_mapping directly (one normalization path for ids)
"""

from pydantic import BaseModel, Field, field_validator

from shopcart.core.product import Product


class ProductPayload(BaseModel):
    """Full product record supplied by the client instead of a catalog id."""
    id: int | str
    name: str = Field(min_length=1, max_length=200)
    price: int = Field(ge=0)
    image: str | None = None
    category: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def reject_bool_id(cls, v):
        if isinstance(v, bool):
            raise ValueError("id must be an int or a string")
        return v

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: int | str) -> int | str:
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("id cannot be empty or whitespace")
        return v

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty or whitespace")
        return v


class ProductResponse(BaseModel):
    """Public product data — id always in canonical string form."""
    id: str
    name: str
    price: int
    image: str | None = None
    category: str = ""

    @classmethod
    def from_product(cls, product: Product) -> "ProductResponse":
        return cls(**product.to_dict())


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
