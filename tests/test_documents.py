"""
Tests for document shaping.
"""

from bson import ObjectId

from quickkart_api.app.services.documents import public_id, shape_document, shape_documents


class TestPublicId:
    """Test public identifier selection."""

    def test_store_identifier_rendered_as_string(self):
        oid = ObjectId()
        assert public_id({"_id": oid}) == str(oid)

    def test_store_identifier_preferred_over_explicit_id(self):
        oid = ObjectId()
        assert public_id({"_id": oid, "id": "legacy"}) == str(oid)

    def test_falls_back_to_explicit_id(self):
        assert public_id({"id": "legacy"}) == "legacy"

    def test_falsy_store_identifier_is_kept(self):
        assert public_id({"_id": 0, "id": 7}) == 0


class TestShapeDocument:
    """Test conversion of stored documents into public documents."""

    def test_none_passes_through(self):
        assert shape_document(None) is None

    def test_replaces_store_identifier(self):
        oid = ObjectId()
        shaped = shape_document({"_id": oid, "name": "Milk"})
        assert shaped == {"id": str(oid), "name": "Milk"}

    def test_does_not_modify_input(self):
        oid = ObjectId()
        document = {"_id": oid, "name": "Milk"}
        shape_document(document)
        assert document == {"_id": oid, "name": "Milk"}

    def test_shapes_embedded_lists(self):
        outer, inner = ObjectId(), ObjectId()
        shaped = shape_document({"_id": outer, "aisle": [{"_id": inner, "number": 1}]}, embedded=("aisle",))
        assert shaped["aisle"] == [{"id": str(inner), "number": 1}]

    def test_shape_documents(self):
        first, second = ObjectId(), ObjectId()
        shaped = shape_documents([{"_id": first}, {"_id": second}])
        assert [doc["id"] for doc in shaped] == [str(first), str(second)]
