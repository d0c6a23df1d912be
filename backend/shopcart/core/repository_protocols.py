"""Boundary Protocols — contracts between the cart core and its collaborators.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - Catalog lookup and notification delivery accessed through Protocol types
    - Implementations provided by the shell (or tests) via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Sync only: every cart operation runs to completion before returning,
      so collaborators are called synchronously and must not block
"""

from typing import Protocol

from shopcart.core.domain_types import NotificationSeverity
from shopcart.core.product import Product


class CatalogLike(Protocol):
    """Read-only product lookup. Returns None for a miss, never raises."""
    def find_by_id(self, product_id: object) -> Product | None: ...


class NotificationSink(Protocol):
    """User-facing message channel. Fire-and-forget: return value ignored."""
    def notify(
        self, message: str,
        severity: NotificationSeverity = NotificationSeverity.SUCCESS,
    ) -> None: ...


class NullNotificationSink:
    """Drops every message — for headless use where toasts are irrelevant."""

    def notify(
        self, message: str,
        severity: NotificationSeverity = NotificationSeverity.SUCCESS,
    ) -> None:
        return None
