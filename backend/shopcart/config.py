"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache) — single instance per process
    - Every setting has a default: the service starts with no .env at all

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Display settings (currency symbol, image placeholder) live here, not in core/,
      and are passed into the pure projection as arguments
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storefront display
    currency_symbol: str = "₹"
    image_placeholder_url: str = "/static/img/placeholder.png"

    # Toasts auto-dismiss after this interval
    notification_dismiss_ms: int = 3000

    # Upper bound on live in-memory carts
    max_carts: int = 10_000

    # Carts untouched this long are evicted when the bound is hit
    cart_idle_timeout_seconds: int = 1800

    @field_validator("notification_dismiss_ms", "max_carts", "cart_idle_timeout_seconds")
    @classmethod
    def must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("must be > 0")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
