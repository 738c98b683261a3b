"""
Business logic for items.

Items are created independently of aisles: the ``aisle`` and ``bay``
fields are labels and nothing checks that they refer to a real aisle.
"""

import logging
from typing import List, Optional

from ..core.db import ITEMS, get_store, parse_object_id
from ..schemas.item import ItemCreate, ItemRead
from .documents import shape_document

logger = logging.getLogger(__name__)


class ItemService:
    """Create and look up items."""

    @classmethod
    async def create_item(cls, data: ItemCreate) -> ItemRead:
        """Persist a new item and return it with its identifier."""
        store = get_store()
        created = await store.insert_one(ITEMS, data.model_dump(by_alias=True))
        item = ItemRead.model_validate(shape_document(created))
        logger.info("Created item %s (%s)", item.id, item.name)
        return item

    @classmethod
    async def get_item(cls, item_id: str) -> Optional[ItemRead]:
        """Return the item with ``item_id`` or ``None`` if it does not exist."""
        object_id = parse_object_id(item_id)
        if object_id is None:
            return None
        document = await get_store().find_one(ITEMS, {"_id": object_id})
        if document is None:
            return None
        return ItemRead.model_validate(shape_document(document))

    @classmethod
    async def list_items(cls) -> List[ItemRead]:
        documents = await get_store().find_all(ITEMS)
        return [ItemRead.model_validate(shape_document(doc)) for doc in documents]
