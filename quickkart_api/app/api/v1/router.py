"""
Top‑level router for version 1 of the REST API.

This router aggregates the per-entity routers under a unified prefix.
When new entities are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import aisles, checkouts, info, inventories, items, maps

router = APIRouter()

router.include_router(items.router, prefix="/items", tags=["items"])
router.include_router(aisles.router, prefix="/aisles", tags=["aisles"])
router.include_router(checkouts.router, prefix="/checkouts", tags=["checkouts"])
router.include_router(maps.router, prefix="/maps", tags=["maps"])
router.include_router(inventories.router, prefix="/inventories", tags=["inventories"])
router.include_router(info.router, prefix="/info", tags=["info"])
