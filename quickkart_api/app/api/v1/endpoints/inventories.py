"""
Inventory endpoints for API v1.

An inventory captures every item present at creation time under an
integer id chosen by the client.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from quickkart_api.app.core.exceptions import ReferenceNotFoundError, ValidationError
from quickkart_api.app.schemas.inventory import InventoryCreate, InventoryRead
from quickkart_api.app.schemas.item import ItemRead
from quickkart_api.app.services.inventory_service import InventoryService

router = APIRouter()


@router.post("/", response_model=InventoryRead, status_code=status.HTTP_201_CREATED)
async def create_inventory(inventory_in: InventoryCreate) -> InventoryRead:
    """Create an inventory.  Returns HTTP 409 if the id is taken."""
    try:
        return await InventoryService.create_inventory(inventory_in)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message) from e


@router.get("/{inventory_id}/items", response_model=List[ItemRead])
async def get_inventory_items(inventory_id: int) -> List[ItemRead]:
    try:
        return await InventoryService.get_inventory_items(inventory_id)
    except ReferenceNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
