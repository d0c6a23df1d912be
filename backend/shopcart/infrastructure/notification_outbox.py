"""Notification Outbox — in-memory toast queue behind the core's NotificationSink.

Invariants:
    - notify() never raises and never blocks: the cart operation is unaffected
    - A notification auto-dismisses dismiss_after_ms after it was created
    - drain() returns only live notifications, oldest first, and empties the outbox
    - Memory bounded without a drain: expired toasts pruned on notify, at most
      max_pending kept (oldest dropped first)

Design Decisions:
    - Pull model: the view polls drain() after a mutation instead of being called
      back, keeping the flow one-directional
    - Clock injectable: tests pass explicit datetimes instead of sleeping
"""

from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from shopcart.core.domain_types import NotificationSeverity

DEFAULT_DISMISS_MS = 3000
DEFAULT_MAX_PENDING = 50


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Notification:
    """One toast message."""
    message: str
    severity: NotificationSeverity = NotificationSeverity.SUCCESS
    created_at: datetime = field(default_factory=_utcnow)
    dismiss_after_ms: int = DEFAULT_DISMISS_MS

    @property
    def expires_at(self) -> datetime:
        return self.created_at + timedelta(milliseconds=self.dismiss_after_ms)

    def is_live(self, now: datetime) -> bool:
        return now < self.expires_at


class NotificationOutbox:
    """Collects notifications for one cart session until the view drains them."""

    def __init__(
        self,
        dismiss_after_ms: int = DEFAULT_DISMISS_MS,
        clock: Callable[[], datetime] = _utcnow,
        max_pending: int = DEFAULT_MAX_PENDING,
    ):
        self.dismiss_after_ms = dismiss_after_ms
        self._clock = clock
        # oldest toasts fall off the left once the bound is hit
        self._pending: deque[Notification] = deque(maxlen=max_pending)

    def notify(
        self, message: str,
        severity: NotificationSeverity = NotificationSeverity.SUCCESS,
    ) -> None:
        now = self._clock()
        self._prune(now)
        self._pending.append(Notification(
            message=message,
            severity=NotificationSeverity(severity),
            created_at=now,
            dismiss_after_ms=self.dismiss_after_ms,
        ))

    def drain(self, now: datetime | None = None) -> list[Notification]:
        """Live notifications, oldest first. Expired ones are dropped silently."""
        now = now or self._clock()
        live = [n for n in self._pending if n.is_live(now)]
        self._pending.clear()
        return live

    def _prune(self, now: datetime) -> None:
        # created_at is non-decreasing, so expired toasts sit at the left
        while self._pending and not self._pending[0].is_live(now):
            self._pending.popleft()

    def __len__(self) -> int:
        return len(self._pending)
