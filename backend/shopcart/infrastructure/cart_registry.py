"""Cart Registry — in-memory owner of every live cart session and the shared catalog.

Invariants:
    - One CartStore + NotificationOutbox pair per cart id; never shared between carts
    - All stores share the registry's read-only ProductCatalog
    - Registry size bounded by max_carts; sessions idle past idle_timeout are evicted
      before a create is refused with CartLimitReachedError
    - Unknown cart id raises ResourceNotFoundError (the shell maps it to 404)

Design Decisions:
    - In-memory, not DB/Redis: cart contents must not survive a reload
    - Singleton registry initialized on startup: FastAPI lifespan manages lifecycle,
      routes reach it through get_registry (overridable in tests)
"""

import logging
import uuid
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from shopcart.core.cart_store import CartStore
from shopcart.core.catalog import ProductCatalog, default_catalog
from shopcart.core.domain_types import CartId
from shopcart.core.errors import (
    CartLimitReachedError, ErrorContext, ResourceNotFoundError,
)
from shopcart.infrastructure.notification_outbox import (
    DEFAULT_DISMISS_MS, NotificationOutbox,
)

logger = logging.getLogger(__name__)

DEFAULT_IDLE_TIMEOUT_SECONDS = 30 * 60


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class CartSession:
    """A cart and its toast outbox, wired together."""
    id: CartId
    store: CartStore
    outbox: NotificationOutbox
    last_used: datetime = field(default_factory=_utcnow)


class CartRegistry:
    """Creates, looks up and discards cart sessions."""

    def __init__(
        self,
        catalog: ProductCatalog,
        max_carts: int = 10_000,
        dismiss_after_ms: int = DEFAULT_DISMISS_MS,
        idle_timeout_seconds: int = DEFAULT_IDLE_TIMEOUT_SECONDS,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self.catalog = catalog
        self.max_carts = max_carts
        self.dismiss_after_ms = dismiss_after_ms
        self.idle_timeout = timedelta(seconds=idle_timeout_seconds)
        self._clock = clock
        # ordered least- to most-recently used: get() moves a session to the end
        self._sessions: dict[CartId, CartSession] = {}

    def create(self) -> CartSession:
        """New empty cart session. Evicts idle carts before refusing at the limit."""
        now = self._clock()
        if len(self._sessions) >= self.max_carts:
            self.evict_idle(now)
        if len(self._sessions) >= self.max_carts:
            raise CartLimitReachedError(self.max_carts)
        cart_id = CartId(uuid.uuid4())
        outbox = NotificationOutbox(
            dismiss_after_ms=self.dismiss_after_ms, clock=self._clock,
        )
        session = CartSession(
            id=cart_id,
            store=CartStore(self.catalog, notifier=outbox),
            outbox=outbox,
            last_used=now,
        )
        self._sessions[cart_id] = session
        logger.info("Cart created", extra={"cart_id": str(cart_id)})
        return session

    def get(self, cart_id: CartId) -> CartSession:
        """Session for this id, marked as used. Raises ResourceNotFoundError when absent."""
        session = self._sessions.pop(cart_id, None)
        if session is None:
            raise ResourceNotFoundError(
                "Cart", str(cart_id), ErrorContext(cart_id=str(cart_id)),
            )
        session.last_used = self._clock()
        self._sessions[cart_id] = session
        return session

    def discard(self, cart_id: CartId) -> None:
        """Drop a session. Raises ResourceNotFoundError when absent."""
        if self._sessions.pop(cart_id, None) is None:
            raise ResourceNotFoundError(
                "Cart", str(cart_id), ErrorContext(cart_id=str(cart_id)),
            )
        logger.info("Cart discarded", extra={"cart_id": str(cart_id)})

    def evict_idle(self, now: datetime | None = None) -> int:
        """Drop sessions unused for longer than idle_timeout. Returns how many went."""
        now = now or self._clock()
        stale = [
            cart_id for cart_id, session in self._sessions.items()
            if now - session.last_used > self.idle_timeout
        ]
        for cart_id in stale:
            del self._sessions[cart_id]
        if stale:
            logger.info(f"Evicted {len(stale)} idle cart(s)")
        return len(stale)

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, cart_id: object) -> bool:
        return cart_id in self._sessions


# Singleton (initialized on startup)
cart_registry: CartRegistry | None = None


def init_registry(
    catalog: ProductCatalog | None = None, **kwargs,
) -> CartRegistry:
    global cart_registry
    if catalog is None:
        catalog = default_catalog()
    cart_registry = CartRegistry(catalog, **kwargs)
    return cart_registry


def get_registry() -> CartRegistry:
    """FastAPI dependency for the cart registry."""
    if cart_registry is None:
        raise RuntimeError("Cart registry not initialized")
    return cart_registry
