"""
Information endpoint for API v1.

Returns the service name and version together with the number of
documents in each collection.  Useful as a quick health check: the
request fails if MongoDB is unreachable.
"""

from typing import Any, Dict

from fastapi import APIRouter

from quickkart_api.app.core.config import settings
from quickkart_api.app.core.db import AISLES, CHECKOUTS, INVENTORIES, ITEMS, MAPS, get_store

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info() -> Dict[str, Any]:
    store = get_store()
    counts = {}
    for collection in (ITEMS, AISLES, CHECKOUTS, MAPS, INVENTORIES):
        counts[collection] = await store.count(collection)
    return {
        "name": settings.project_name,
        "version": settings.api_version,
        "graphql_path": settings.graphql_path,
        "collections": counts,
    }
