"""Shop Cart API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map ShopCartError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Cart registry initialized on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Registry seeded with the default catalog; carts are discarded with the process
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shopcart.api.error_handlers import register_error_handlers
from shopcart.api.routes import cart_items, cart_lifecycle, catalog, health
from shopcart.config import get_settings
from shopcart.infrastructure.cart_registry import init_registry
from shopcart.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_registry(
        max_carts=settings.max_carts,
        dismiss_after_ms=settings.notification_dismiss_ms,
        idle_timeout_seconds=settings.cart_idle_timeout_seconds,
    )
    logger.info("Shop cart API started")
    yield
    logger.info("Shop cart API shutting down")


app = FastAPI(
    title="Shop Cart API", version="1.0.0", lifespan=lifespan,
)

# CORS — configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(cart_lifecycle.router)
app.include_router(cart_items.router)

register_error_handlers(app)
