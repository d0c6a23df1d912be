"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId is always a canonical str — never compare raw int ids in domain logic
    - Money is a non-negative int in the smallest currency unit (no fractions)
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Ids normalized to str at the catalog boundary: one matching rule (strict equality)
      instead of int/str coercion scattered across mutation paths
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", str)
CartId = NewType("CartId", UUID)


# ─── Value Types ─────────────────────────────────────────────────

Money = NewType("Money", int)  # smallest currency unit, >= 0


# ─── Enums ───────────────────────────────────────────────────────

class NotificationSeverity(str, Enum):
    """Severity tag carried by user-facing toast messages."""
    SUCCESS = "success"
    ERROR = "error"


# ─── Helpers ─────────────────────────────────────────────────────

def normalize_product_id(raw: object) -> ProductId:
    """Canonical string form of a product id (3, "3" and " 3 " all map to "3").

    Floats with no fraction collapse to their int form so 3.0 and 3 stay
    the same product.
    """
    if isinstance(raw, float) and raw.is_integer():
        raw = int(raw)
    return ProductId(str(raw).strip())
