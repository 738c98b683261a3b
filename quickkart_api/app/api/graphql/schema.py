"""
Query and Mutation roots of the GraphQL schema.

Resolvers stay thin: they build the pydantic input model, call the
matching service and convert the result into a strawberry type.
Service errors are not caught here; strawberry reports them in the
response's ``errors`` list with the service's message.
"""

from typing import List, Optional

import strawberry
from strawberry.fastapi import GraphQLRouter

from ...core.config import settings
from ...schemas.aisle import AisleCreate
from ...schemas.checkout import CheckoutCreate
from ...schemas.inventory import InventoryCreate
from ...schemas.item import ItemCreate
from ...schemas.store_map import MapCreate
from ...services.aisle_service import AisleService
from ...services.checkout_service import CheckoutService
from ...services.inventory_service import InventoryService
from ...services.item_service import ItemService
from ...services.map_service import MapService
from .types import Aisle, Checkout, Inventory, Item, StoreMap


@strawberry.type
class Query:
    @strawberry.field(description="Every item currently stored.")
    async def items(self) -> List[Item]:
        return [Item.from_schema(item) for item in await ItemService.list_items()]

    @strawberry.field
    async def get_item(self, id: strawberry.ID) -> Optional[Item]:
        item = await ItemService.get_item(id)
        return Item.from_schema(item) if item else None

    @strawberry.field(description="Items captured by the inventory with this id.")
    async def get_inventory(self, id: int) -> List[Item]:
        items = await InventoryService.get_inventory_items(id)
        return [Item.from_schema(item) for item in items]

    @strawberry.field
    async def aisles(self) -> List[Aisle]:
        return [Aisle.from_schema(aisle) for aisle in await AisleService.list_aisles()]

    @strawberry.field
    async def get_aisle(self, id: strawberry.ID) -> Optional[Aisle]:
        aisle = await AisleService.get_aisle(id)
        return Aisle.from_schema(aisle) if aisle else None

    @strawberry.field
    async def checkouts(self) -> List[Checkout]:
        return [Checkout.from_schema(lane) for lane in await CheckoutService.list_checkouts()]

    @strawberry.field
    async def get_checkout(self, id: strawberry.ID) -> Optional[Checkout]:
        lane = await CheckoutService.get_checkout(id)
        return Checkout.from_schema(lane) if lane else None

    @strawberry.field
    async def get_map(self, id: strawberry.ID) -> Optional[StoreMap]:
        store_map = await MapService.get_map(id)
        return StoreMap.from_schema(store_map) if store_map else None

    @strawberry.field(description="Every [x, y] coordinate inside the map, x-major.")
    async def get_all_map_coords(self, id: strawberry.ID) -> List[List[int]]:
        return await MapService.get_all_map_coords(id)


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_item(
        self,
        name: str,
        aisle: str,
        bay: str,
        price: float,
        x_val: int,
        y_val: int,
    ) -> Item:
        data = ItemCreate(name=name, aisle=aisle, bay=bay, price=price, x_val=x_val, y_val=y_val)
        return Item.from_schema(await ItemService.create_item(data))

    @strawberry.mutation(description="Create an aisle; its three bays are computed from the bounds.")
    async def create_aisle(
        self,
        number: int,
        name: str,
        x_start_val: int,
        x_end_val: int,
        y_start_val: int,
        y_end_val: int,
    ) -> Aisle:
        data = AisleCreate(
            number=number,
            name=name,
            x_start_val=x_start_val,
            x_end_val=x_end_val,
            y_start_val=y_start_val,
            y_end_val=y_end_val,
        )
        return Aisle.from_schema(await AisleService.create_aisle(data))

    @strawberry.mutation
    async def create_checkout(
        self,
        lane: int,
        x_start_val: int,
        x_end_val: int,
        y_start_val: int,
        y_end_val: int,
    ) -> Checkout:
        data = CheckoutCreate(
            lane=lane,
            x_start_val=x_start_val,
            x_end_val=x_end_val,
            y_start_val=y_start_val,
            y_end_val=y_end_val,
        )
        return Checkout.from_schema(await CheckoutService.create_checkout(data))

    @strawberry.mutation(description="Create a map embedding every existing aisle and checkout lane.")
    async def create_map(self, title: str, description: str, width: int, length: int) -> StoreMap:
        data = MapCreate(title=title, description=description, width=width, length=length)
        return StoreMap.from_schema(await MapService.create_map(data))

    @strawberry.mutation(description="Create an inventory embedding every existing item.")
    async def create_inventory(self, id: int, title: str) -> Inventory:
        data = InventoryCreate(id=id, title=title)
        return Inventory.from_schema(await InventoryService.create_inventory(data))


schema = strawberry.Schema(query=Query, mutation=Mutation)


def create_graphql_router() -> GraphQLRouter:
    """Build the FastAPI router serving ``schema``.

    The GraphiQL IDE is served on GET requests unless disabled with
    ``GRAPHIQL=false``.
    """
    return GraphQLRouter(schema, graphql_ide="graphiql" if settings.graphiql else None)
