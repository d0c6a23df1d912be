"""Health Check — liveness endpoint for container orchestration.

Invariants:
    - GET /api/v1/health/ always returns 200 if the process is up
    - Reports live cart count when the registry is initialized (no IO involved)
"""

import logging
from fastapi import APIRouter, status

import shopcart.infrastructure.cart_registry as registry_module

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness check. Returns 200 if the process is up."""
    registry = registry_module.cart_registry
    return {
        "status": "healthy",
        "service": "shopcart-api",
        "version": "1.0.0",
        "live_carts": len(registry) if registry is not None else 0,
    }
