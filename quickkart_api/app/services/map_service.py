"""
Business logic for store maps.

A map declares the store's overall width and length and embeds a
snapshot of every aisle and checkout lane that exists when it is
created.  Creation is rejected unless every embedded aisle and lane
lies inside the map.  Later changes to aisles or lanes are not copied
into maps that already exist.

The sequence "check title, read snapshot, validate, insert" is not
atomic; two concurrent requests with the same title can both pass the
uniqueness check.
"""

import logging
from typing import Any, Dict, List, NoReturn, Optional

from ..core.db import AISLES, CHECKOUTS, MAPS, get_store, parse_object_id
from ..core.exceptions import ValidationError
from ..schemas.store_map import MapCreate, MapRead
from .documents import shape_document

logger = logging.getLogger(__name__)

MAP_EXISTS = "Map already exists"
INVALID_DIMENSIONS = "Invalid map dimensions. Must have an area of at least 1 unit"
AISLE_OUT_OF_BOUNDS = "Aisle dimensions exceed map dimensions"
CHECKOUT_OUT_OF_BOUNDS = "Checkout lane dimensions exceed map dimensions"
MAP_NOT_FOUND = "Map not found"


def within_range(start: int, end: int, lower: int, upper: int) -> bool:
    """Return ``True`` if ``[start, end]`` lies inside ``[lower, upper]``."""
    return lower <= start <= end <= upper


def fits_map(document: Dict[str, Any], width: int, length: int) -> bool:
    """Check a stored aisle or lane's bounding box against map dimensions."""
    return within_range(document["xStartVal"], document["xEndVal"], 0, width) and within_range(
        document["yStartVal"], document["yEndVal"], 0, length
    )


def map_coordinates(width: int, length: int) -> List[List[int]]:
    """Every integer ``[x, y]`` of a ``width`` by ``length`` grid, x-major."""
    return [[x, y] for x in range(width) for y in range(length)]


class MapService:
    """Create maps and answer map queries."""

    @classmethod
    async def create_map(cls, data: MapCreate) -> MapRead:
        """Validate and persist a new map with a snapshot of the layout.

        Raises
        ------
        ValidationError
            If a map with the same title exists, a dimension is not
            positive, or any aisle or checkout lane falls outside the
            map.  Nothing is written in that case.
        """
        store = get_store()

        if await store.find_one(MAPS, {"title": data.title}):
            cls._reject(data.title, MAP_EXISTS)
        if not (data.width > 0 and data.length > 0):
            cls._reject(data.title, INVALID_DIMENSIONS)

        aisles = await store.find_all(AISLES)
        checkout_lanes = await store.find_all(CHECKOUTS)

        for aisle in aisles:
            if not fits_map(aisle, data.width, data.length):
                cls._reject(data.title, AISLE_OUT_OF_BOUNDS)
        for lane in checkout_lanes:
            if not fits_map(lane, data.width, data.length):
                cls._reject(data.title, CHECKOUT_OUT_OF_BOUNDS)

        document = data.model_dump(by_alias=True)
        document["aisle"] = aisles
        document["checkout"] = checkout_lanes
        created = await store.insert_one(MAPS, document)
        store_map = cls._to_read(created)
        logger.info(
            "Created map %s ('%s') with %d aisles and %d checkout lanes",
            store_map.id,
            store_map.title,
            len(aisles),
            len(checkout_lanes),
        )
        return store_map

    @classmethod
    async def get_map(cls, map_id: str) -> Optional[MapRead]:
        """Return the map with ``map_id`` or ``None``."""
        document = await cls._find(map_id)
        if document is None:
            return None
        return cls._to_read(document)

    @classmethod
    async def get_all_map_coords(cls, map_id: str) -> List[List[int]]:
        """Enumerate every coordinate of the map's grid.

        Raises
        ------
        ValidationError
            If no map with ``map_id`` exists.
        """
        document = await cls._find(map_id)
        if document is None:
            raise ValidationError(MAP_NOT_FOUND)
        return map_coordinates(document["width"], document["length"])

    @staticmethod
    async def _find(map_id: str) -> Optional[Dict[str, Any]]:
        object_id = parse_object_id(map_id)
        if object_id is None:
            return None
        return await get_store().find_one(MAPS, {"_id": object_id})

    @staticmethod
    def _to_read(document: Dict[str, Any]) -> MapRead:
        return MapRead.model_validate(shape_document(document, embedded=("aisle", "checkout")))

    @staticmethod
    def _reject(title: str, message: str) -> NoReturn:
        logger.warning("Rejected map '%s': %s", title, message)
        raise ValidationError(message)
