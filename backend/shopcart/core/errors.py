"""Error Hierarchy — typed, categorized exceptions for shell-level failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Cart mutations in core/ never raise these: lookup misses are absorbed as no-ops
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with ShopCartError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CAPACITY = "capacity"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    cart_id: str | None = None
    product_id: str | None = None
    debug_info: dict[str, Any] | None = None


class ShopCartError(Exception):
    """Base exception for all shop cart errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "cart_id": self.context.cart_id,
                    "product_id": self.context.product_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class InvalidProductError(ShopCartError):
    """Product record is missing a required field or carries a bad value."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_PRODUCT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(ShopCartError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class CartLimitReachedError(ShopCartError):
    """In-memory registry already holds the configured maximum of carts."""
    def __init__(self, max_carts: int, context: ErrorContext | None = None):
        super().__init__(
            f"Cart limit reached ({max_carts}). Delete an existing cart first.",
            "CART_LIMIT_REACHED", ErrorCategory.CAPACITY,
            ErrorSeverity.WARNING, context, 429,
        )
        self.max_carts = max_carts
