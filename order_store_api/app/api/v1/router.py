"""
Top‑level router for version 1 of the API.

This router aggregates the domain routers under a unified prefix.
When new endpoints are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, orders

router = APIRouter()

router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(orders.router, prefix="/orders", tags=["orders"])
