"""
Tests for the MongoDB document store adapter and its lifecycle.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId

from quickkart_api.app.core import db
from quickkart_api.app.core.config import settings
from quickkart_api.app.core.db import DocumentStore, close_db, get_store, init_db, parse_object_id, set_store


@pytest.fixture
def mongo_collection():
    """Mock collection exposing the async pymongo calls the store uses"""
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)
    collection.insert_one = AsyncMock()
    collection.count_documents = AsyncMock(return_value=0)
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    return collection


@pytest.fixture
def mongo_client(mongo_collection):
    """Mock AsyncMongoClient whose databases all return mongo_collection"""
    database = MagicMock()
    database.__getitem__.return_value = mongo_collection
    client = MagicMock()
    client.__getitem__.return_value = database
    client.admin.command = AsyncMock(return_value={"ok": 1})
    client.close = AsyncMock()
    return client


@pytest.fixture
def no_store():
    """Make sure no shared store is installed around the test"""
    set_store(None)
    yield
    set_store(None)


class TestDocumentStore:
    """Test collection operations against a mocked client."""

    @pytest.mark.asyncio
    async def test_insert_one_returns_copy_with_id(self, mongo_client, mongo_collection):
        oid = ObjectId()
        mongo_collection.insert_one.return_value = MagicMock(inserted_id=oid)
        store = DocumentStore(mongo_client, "quickkart")
        document = {"name": "Milk"}

        created = await store.insert_one("Item", document)

        assert created == {"name": "Milk", "_id": oid}
        assert created is not document
        mongo_client.__getitem__.assert_called_with("quickkart")
        mongo_client["quickkart"].__getitem__.assert_called_with("Item")
        mongo_collection.insert_one.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_find_one_passes_query(self, mongo_client, mongo_collection):
        oid = ObjectId()
        mongo_collection.find_one.return_value = {"_id": oid, "title": "Main Store"}
        store = DocumentStore(mongo_client, "quickkart")

        found = await store.find_one("Map", {"title": "Main Store"})

        assert found == {"_id": oid, "title": "Main Store"}
        mongo_collection.find_one.assert_awaited_once_with({"title": "Main Store"})

    @pytest.mark.asyncio
    async def test_find_all_reads_whole_cursor(self, mongo_client, mongo_collection):
        documents = [{"_id": ObjectId(), "number": 1}, {"_id": ObjectId(), "number": 2}]
        mongo_collection.find.return_value.to_list.return_value = documents
        store = DocumentStore(mongo_client, "quickkart")

        assert await store.find_all("Aisles") == documents
        mongo_collection.find.assert_called_once_with()
        mongo_collection.find.return_value.to_list.assert_awaited_once_with(length=None)

    @pytest.mark.asyncio
    async def test_count(self, mongo_client, mongo_collection):
        mongo_collection.count_documents.return_value = 3
        store = DocumentStore(mongo_client, "quickkart")

        assert await store.count("Checkout") == 3
        mongo_collection.count_documents.assert_awaited_once_with({})

    @pytest.mark.asyncio
    async def test_ping_and_close(self, mongo_client):
        store = DocumentStore(mongo_client, "quickkart")
        await store.ping()
        await store.close()
        mongo_client.admin.command.assert_awaited_once_with("ping")
        mongo_client.close.assert_awaited_once()


class TestLifecycle:
    """Test opening and closing the shared store."""

    def test_get_store_before_init(self, no_store):
        with pytest.raises(RuntimeError):
            get_store()

    @pytest.mark.asyncio
    async def test_init_and_close(self, no_store, mongo_client):
        with patch.object(db, "AsyncMongoClient", return_value=mongo_client) as client_cls:
            store = await init_db()
            again = await init_db()

        client_cls.assert_called_once_with(settings.db_uri)
        mongo_client.__getitem__.assert_called_with(settings.db_name)
        mongo_client.admin.command.assert_awaited_once_with("ping")
        assert get_store() is store
        assert again is store

        await close_db()
        mongo_client.close.assert_awaited_once()
        with pytest.raises(RuntimeError):
            get_store()

    @pytest.mark.asyncio
    async def test_close_without_store_is_noop(self, no_store):
        await close_db()
        with pytest.raises(RuntimeError):
            get_store()

    @pytest.mark.asyncio
    async def test_failed_ping_leaves_no_store(self, no_store, mongo_client):
        mongo_client.admin.command.side_effect = ConnectionError("unreachable")
        with patch.object(db, "AsyncMongoClient", return_value=mongo_client):
            with pytest.raises(ConnectionError):
                await init_db()
        with pytest.raises(RuntimeError):
            get_store()


class TestParseObjectId:
    """Test client identifier parsing."""

    def test_valid_hex(self):
        oid = ObjectId()
        assert parse_object_id(str(oid)) == oid

    def test_object_id_passes_through(self):
        oid = ObjectId()
        assert parse_object_id(oid) is oid

    @pytest.mark.parametrize("value", ["nope", "", None, 12, "0123456789abcdef0123456z"])
    def test_invalid_values(self, value):
        assert parse_object_id(value) is None
