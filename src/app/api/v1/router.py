"""API router aggregating all endpoint routers.

All endpoints are mounted under the configured API prefix (``/api`` by default).
"""

from __future__ import annotations

from fastapi import APIRouter

from app.api.v1.endpoints import categories, health, recipes


router = APIRouter()

# Include health endpoints
router.include_router(health.router)

# Include recipe endpoints
router.include_router(recipes.router)

# Include category endpoints
router.include_router(categories.router)
