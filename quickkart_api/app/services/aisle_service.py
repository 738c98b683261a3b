"""
Business logic for aisles.

Every aisle is split into three bays along its longer side.  The bays
are computed once, when the aisle is created, and stored with it.
"""

import logging
from typing import List, Optional

from ..core.db import AISLES, get_store, parse_object_id
from ..core.exceptions import ValidationError
from ..schemas.aisle import AisleCreate, AisleRead
from .documents import shape_document

logger = logging.getLogger(__name__)

BAYS_PER_AISLE = 3


def _split_span(start: int, end: int, bay_length: int) -> List[List[int]]:
    first = [start, start + bay_length - 1]
    second = [start + bay_length, start + 2 * bay_length - 1]
    third = [start + 2 * bay_length, end]
    return [first, second, third]


def compute_bays(x_start: int, x_end: int, y_start: int, y_end: int) -> List[List[int]]:
    """Divide an aisle's bounding box into three bays.

    Spans are inclusive, so an aisle from x=0 to x=8 is 9 units wide.
    When the aisle is wider than it is long the bays are x ranges;
    otherwise (including square aisles) they are y ranges.  Each bay is
    ``span // 3`` units and the last one runs to the end of the aisle,
    absorbing any remainder.

    Raises
    ------
    ValidationError
        If either axis ends before it starts, or the longer side is
        shorter than three units, since at least one bay would be empty.
    """
    if x_end < x_start or y_end < y_start:
        raise ValidationError("Aisle end coordinates must not precede start coordinates")

    width = x_end - x_start + 1
    length = y_end - y_start + 1

    if width > length:
        bay_length = width // BAYS_PER_AISLE
        start, end = x_start, x_end
    else:
        bay_length = length // BAYS_PER_AISLE
        start, end = y_start, y_end

    if bay_length < 1:
        raise ValidationError("Aisle must span at least 3 units along its longer side")
    return _split_span(start, end, bay_length)


class AisleService:
    """Create and look up aisles."""

    @classmethod
    async def create_aisle(cls, data: AisleCreate) -> AisleRead:
        """Compute the aisle's bays, persist it and return the stored aisle."""
        try:
            bays = compute_bays(data.x_start_val, data.x_end_val, data.y_start_val, data.y_end_val)
        except ValidationError as exc:
            logger.warning("Rejected aisle '%s': %s", data.name, exc.message)
            raise
        document = data.model_dump(by_alias=True)
        document["bays"] = bays
        created = await get_store().insert_one(AISLES, document)
        aisle = AisleRead.model_validate(shape_document(created))
        logger.info("Created aisle %s (number %s, bays %s)", aisle.id, aisle.number, bays)
        return aisle

    @classmethod
    async def get_aisle(cls, aisle_id: str) -> Optional[AisleRead]:
        """Return the aisle with ``aisle_id`` or ``None``."""
        object_id = parse_object_id(aisle_id)
        if object_id is None:
            return None
        document = await get_store().find_one(AISLES, {"_id": object_id})
        if document is None:
            return None
        return AisleRead.model_validate(shape_document(document))

    @classmethod
    async def list_aisles(cls) -> List[AisleRead]:
        documents = await get_store().find_all(AISLES)
        return [AisleRead.model_validate(shape_document(doc)) for doc in documents]
