"""
Strawberry object types.

Python attribute names are snake_case; strawberry exposes them in
camelCase (``x_start_val`` becomes ``xStartVal``).  Each type is built
from the matching pydantic read model with ``from_schema``.
"""

from typing import List, Optional

import strawberry

from ...schemas.aisle import AisleRead
from ...schemas.checkout import CheckoutRead
from ...schemas.inventory import InventoryRead
from ...schemas.item import ItemRead
from ...schemas.store_map import MapRead


@strawberry.type(description="A product placed on a shelf.")
class Item:
    id: strawberry.ID
    name: str
    aisle: str
    bay: str
    price: float
    x_val: int
    y_val: int

    @classmethod
    def from_schema(cls, item: ItemRead) -> "Item":
        return cls(**item.model_dump())


@strawberry.type(description="A numbered aisle split into three bays.")
class Aisle:
    id: strawberry.ID
    number: int
    name: str
    bays: List[List[int]]
    x_start_val: int
    x_end_val: int
    y_start_val: int
    y_end_val: int

    @classmethod
    def from_schema(cls, aisle: AisleRead) -> "Aisle":
        return cls(**aisle.model_dump())


@strawberry.type(description="A checkout lane and its footprint.")
class Checkout:
    id: strawberry.ID
    lane: int
    x_start_val: int
    x_end_val: int
    y_start_val: int
    y_end_val: int

    @classmethod
    def from_schema(cls, lane: CheckoutRead) -> "Checkout":
        return cls(**lane.model_dump())


@strawberry.type(description="Store dimensions with a snapshot of aisles and checkout lanes.")
class StoreMap:
    id: strawberry.ID
    title: str
    description: Optional[str]
    aisle: List[Aisle]
    checkout: List[Checkout]
    width: int
    length: int

    @classmethod
    def from_schema(cls, store_map: MapRead) -> "StoreMap":
        return cls(
            id=strawberry.ID(store_map.id),
            title=store_map.title,
            description=store_map.description,
            aisle=[Aisle.from_schema(aisle) for aisle in store_map.aisle],
            checkout=[Checkout.from_schema(lane) for lane in store_map.checkout],
            width=store_map.width,
            length=store_map.length,
        )


@strawberry.type(description="A named snapshot of all items.")
class Inventory:
    id: int
    title: str
    items: List[Item]

    @classmethod
    def from_schema(cls, inventory: InventoryRead) -> "Inventory":
        return cls(
            id=inventory.id,
            title=inventory.title,
            items=[Item.from_schema(item) for item in inventory.items],
        )
