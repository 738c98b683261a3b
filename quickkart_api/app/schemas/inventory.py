"""
Pydantic models for inventories.

Unlike the other entities an inventory is keyed by an integer chosen
by the caller.  Its ``items`` list is a copy of every item present at
creation time.
"""

from typing import List

from pydantic import Field

from .common import CamelModel
from .item import ItemRead


class InventoryCreate(CamelModel):
    id: int = Field(..., examples=[1])
    title: str = Field(..., examples=["October stock take"])


class InventoryRead(CamelModel):
    id: int
    title: str
    items: List[ItemRead] = []
