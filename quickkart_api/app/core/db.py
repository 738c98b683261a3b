"""
MongoDB integration.

This module owns the single ``DocumentStore`` shared by every request.
``init_db`` opens it when the application starts and ``close_db``
releases it on shutdown; services obtain it through ``get_store``.
The store is a thin pass-through over the collections used by the
service and exposes only the three operations the services need:
find one document by filter, read a whole collection, and insert a
document.

There are no transactions.  Multi-step operations such as creating a
map (existence check, snapshot, insert) are not atomic.
"""

import logging
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import AsyncMongoClient

from .config import settings

# Collection names.  They match the data already stored by earlier
# deployments, so keep the mixed singular/plural naming.
ITEMS = "Item"
AISLES = "Aisles"
CHECKOUTS = "Checkout"
MAPS = "Map"
INVENTORIES = "Inventory"

logger = logging.getLogger(__name__)


class DocumentStore:
    """Collection-scoped access to a MongoDB database."""

    def __init__(self, client: AsyncMongoClient, db_name: str) -> None:
        self._client = client
        self._db = client[db_name]

    async def find_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Return the first document matching ``query`` or ``None``."""
        return await self._db[collection].find_one(query)

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        """Return every document currently stored in ``collection``."""
        cursor = self._db[collection].find()
        return await cursor.to_list(length=None)

    async def insert_one(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        """Insert ``document`` and return a copy carrying its ``_id``."""
        created = dict(document)
        result = await self._db[collection].insert_one(created)
        created["_id"] = result.inserted_id
        return created

    async def count(self, collection: str) -> int:
        return await self._db[collection].count_documents({})

    async def ping(self) -> None:
        await self._client.admin.command("ping")

    async def close(self) -> None:
        await self._client.close()


_store: Optional[DocumentStore] = None


def parse_object_id(value: Any) -> Optional[ObjectId]:
    """Convert a client supplied identifier into an ``ObjectId``.

    Returns ``None`` when ``value`` is not a valid identifier, which
    callers treat the same as a missing record.
    """
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


def get_store() -> DocumentStore:
    """Return the shared store opened by ``init_db``."""
    if _store is None:
        raise RuntimeError("Document store is not initialised; call init_db() first")
    return _store


def set_store(store: Optional[DocumentStore]) -> None:
    """Install ``store`` as the shared store (``None`` clears it)."""
    global _store
    _store = store


async def init_db() -> DocumentStore:
    """Open the shared store unless one is already installed.

    The connection string and database name come from ``DB_URI`` and
    ``DB_NAME``.  A ``ping`` is issued so that a misconfigured URI
    fails at startup instead of on the first request.
    """
    global _store
    if _store is not None:
        return _store
    client = AsyncMongoClient(settings.db_uri)
    store = DocumentStore(client, settings.db_name)
    await store.ping()
    logger.info("Connected to MongoDB database '%s'", settings.db_name)
    _store = store
    return store


async def close_db() -> None:
    """Close the shared store, if open."""
    global _store
    if _store is None:
        return
    await _store.close()
    _store = None
    logger.info("Closed MongoDB connection")
