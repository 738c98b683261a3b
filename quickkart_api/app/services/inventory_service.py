"""
Business logic for inventories.

An inventory is a named copy of every item that exists at the moment
it is created.  The caller chooses the inventory's integer id, which
is stored as the document's ``_id`` so MongoDB keeps it unique.
"""

import logging
from typing import List

from ..core.db import INVENTORIES, ITEMS, get_store
from ..core.exceptions import ReferenceNotFoundError, ValidationError
from ..schemas.inventory import InventoryCreate, InventoryRead
from ..schemas.item import ItemRead
from .documents import shape_document

logger = logging.getLogger(__name__)


class InventoryService:
    """Snapshot items into inventories and read them back."""

    @classmethod
    async def create_inventory(cls, data: InventoryCreate) -> InventoryRead:
        """Store a snapshot of all current items under ``data.id``.

        Items inserted after the snapshot is read are not included.

        Raises
        ------
        ValidationError
            If an inventory with the same id already exists.
        """
        store = get_store()
        if await store.find_one(INVENTORIES, {"_id": data.id}):
            logger.warning("Rejected inventory %s: already exists", data.id)
            raise ValidationError("Inventory already exists")

        items = await store.find_all(ITEMS)
        document = {"_id": data.id, "title": data.title, "items": items}
        created = await store.insert_one(INVENTORIES, document)
        inventory = InventoryRead.model_validate(shape_document(created, embedded=("items",)))
        logger.info("Created inventory %s ('%s') with %d items", inventory.id, inventory.title, len(items))
        return inventory

    @classmethod
    async def get_inventory_items(cls, inventory_id: int) -> List[ItemRead]:
        """Return the items captured by inventory ``inventory_id``.

        Raises
        ------
        ReferenceNotFoundError
            If the inventory does not exist.
        """
        document = await get_store().find_one(INVENTORIES, {"_id": inventory_id})
        if document is None:
            raise ReferenceNotFoundError("Inventory not found")
        inventory = InventoryRead.model_validate(shape_document(document, embedded=("items",)))
        return inventory.items
