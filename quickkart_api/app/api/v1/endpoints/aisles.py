"""
Aisle endpoints for API v1.

The request body carries the aisle's bounds; the response includes the
three bays computed from them.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from quickkart_api.app.core.exceptions import ValidationError
from quickkart_api.app.schemas.aisle import AisleCreate, AisleRead
from quickkart_api.app.services.aisle_service import AisleService

router = APIRouter()


@router.get("/", response_model=List[AisleRead])
async def list_aisles() -> List[AisleRead]:
    return await AisleService.list_aisles()


@router.get("/{aisle_id}", response_model=AisleRead)
async def get_aisle(aisle_id: str) -> AisleRead:
    aisle = await AisleService.get_aisle(aisle_id)
    if aisle is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Aisle not found")
    return aisle


@router.post("/", response_model=AisleRead, status_code=status.HTTP_201_CREATED)
async def create_aisle(aisle_in: AisleCreate) -> AisleRead:
    """Create an aisle.

    Returns HTTP 400 when the aisle is too small to hold three bays.
    """
    try:
        return await AisleService.create_aisle(aisle_in)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
