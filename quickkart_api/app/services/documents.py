"""
Presentation helpers for documents read from MongoDB.

Stored documents carry MongoDB's ``_id``; clients see an ``id`` field
instead.  ``shape_document`` performs that mapping without touching the
stored data.
"""

from typing import Any, Dict, Iterable, List, Optional

from bson import ObjectId


def public_id(document: Dict[str, Any]) -> Any:
    """Return the public identifier of ``document``.

    The store-assigned ``_id`` wins; an explicit ``id`` attribute is
    used only when ``_id`` is absent.  ``ObjectId`` values are rendered
    as their hex string.
    """
    value = document.get("_id")
    if value is None:
        value = document.get("id")
    if isinstance(value, ObjectId):
        return str(value)
    return value


def shape_document(
    document: Optional[Dict[str, Any]],
    embedded: Iterable[str] = (),
) -> Optional[Dict[str, Any]]:
    """Return a copy of ``document`` with ``_id`` replaced by ``id``.

    ``embedded`` names list fields holding snapshot copies of other
    documents (a map's aisles, an inventory's items); each element of
    those lists is shaped as well.
    """
    if document is None:
        return None
    shaped = {key: value for key, value in document.items() if key != "_id"}
    shaped["id"] = public_id(document)
    for field in embedded:
        if field in shaped and shaped[field] is not None:
            shaped[field] = shape_documents(shaped[field])
    return shaped


def shape_documents(documents: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return [shape_document(document) for document in documents]
