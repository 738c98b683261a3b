"""
Item endpoints for API v1.

Items can be listed, retrieved by identifier and created.  There are
no update or delete routes; items are create-only.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from quickkart_api.app.schemas.item import ItemCreate, ItemRead
from quickkart_api.app.services.item_service import ItemService

router = APIRouter()


@router.get("/", response_model=List[ItemRead])
async def list_items() -> List[ItemRead]:
    """Return every stored item."""
    return await ItemService.list_items()


@router.get("/{item_id}", response_model=ItemRead)
async def get_item(item_id: str) -> ItemRead:
    """Retrieve a single item by its identifier.

    Returns HTTP 404 if the item is not found or the identifier is
    malformed.
    """
    item = await ItemService.get_item(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Item not found")
    return item


@router.post("/", response_model=ItemRead, status_code=status.HTTP_201_CREATED)
async def create_item(item_in: ItemCreate) -> ItemRead:
    """Create a new item.  Aisle and bay labels are not validated."""
    return await ItemService.create_item(item_in)
