"""
Test configuration and fixtures
"""

import copy
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from quickkart_api.app.core.db import set_store
from quickkart_api.app.main import app


class InMemoryDocumentStore:
    """Dict-backed stand-in for ``DocumentStore``.

    Supports equality filters on top-level fields, which is all the
    services use.  Documents are deep-copied on the way in and out so
    tests observe the same isolation MongoDB gives.
    """

    def __init__(self):
        self.collections: Dict[str, List[Dict[str, Any]]] = {}

    async def find_one(self, collection: str, query: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        for document in self.collections.get(collection, []):
            if all(document.get(key) == value for key, value in query.items()):
                return copy.deepcopy(document)
        return None

    async def find_all(self, collection: str) -> List[Dict[str, Any]]:
        return copy.deepcopy(self.collections.get(collection, []))

    async def insert_one(self, collection: str, document: Dict[str, Any]) -> Dict[str, Any]:
        created = copy.deepcopy(document)
        created.setdefault("_id", ObjectId())
        documents = self.collections.setdefault(collection, [])
        if any(existing["_id"] == created["_id"] for existing in documents):
            raise DuplicateKeyError("duplicate key error")
        documents.append(created)
        return copy.deepcopy(created)

    async def count(self, collection: str) -> int:
        return len(self.collections.get(collection, []))

    async def ping(self) -> None:
        return None

    async def close(self) -> None:
        return None


@pytest.fixture(scope="function")
def store():
    """Install a fresh in-memory store for each test"""
    memory_store = InMemoryDocumentStore()
    set_store(memory_store)
    yield memory_store
    set_store(None)


@pytest.fixture(scope="function")
def client(store):
    """Create a test client backed by the in-memory store"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def graphql(client):
    """Post a GraphQL document and return the decoded response body"""

    def execute(query: str, variables: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        response = client.post("/quickkart", json={"query": query, "variables": variables or {}})
        assert response.status_code == 200
        return response.json()

    return execute


@pytest.fixture
def sample_item():
    return {
        "name": "Whole Milk 1L",
        "aisle": "Dairy",
        "bay": "2",
        "price": 1.49,
        "xVal": 12,
        "yVal": 4,
    }


@pytest.fixture
def sample_aisle():
    return {
        "number": 1,
        "name": "Cereal",
        "xStartVal": 0,
        "xEndVal": 8,
        "yStartVal": 0,
        "yEndVal": 2,
    }
