"""
Store map endpoints for API v1.

Creating a map copies every current aisle and checkout lane into it.
Validation failures are returned as HTTP 400, except a duplicate
title which is a 409 conflict.
"""

from typing import List

from fastapi import APIRouter, HTTPException, status

from quickkart_api.app.core.exceptions import ValidationError
from quickkart_api.app.schemas.store_map import MapCreate, MapRead
from quickkart_api.app.services.map_service import MAP_EXISTS, MAP_NOT_FOUND, MapService

router = APIRouter()


@router.post("/", response_model=MapRead, status_code=status.HTTP_201_CREATED)
async def create_map(map_in: MapCreate) -> MapRead:
    try:
        return await MapService.create_map(map_in)
    except ValidationError as e:
        code = status.HTTP_409_CONFLICT if e.message == MAP_EXISTS else status.HTTP_400_BAD_REQUEST
        raise HTTPException(status_code=code, detail=e.message) from e


@router.get("/{map_id}", response_model=MapRead)
async def get_map(map_id: str) -> MapRead:
    store_map = await MapService.get_map(map_id)
    if store_map is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=MAP_NOT_FOUND)
    return store_map


@router.get("/{map_id}/coords", response_model=List[List[int]])
async def get_all_map_coords(map_id: str) -> List[List[int]]:
    """Return every ``[x, y]`` coordinate of the map, x-major.

    The response grows with ``width * length``; large maps produce
    large payloads.
    """
    try:
        return await MapService.get_all_map_coords(map_id)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
