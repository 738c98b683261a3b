"""
Pydantic models for aisles.

Clients supply the aisle's number, name and bounding box.  The three
bays are computed by ``AisleService`` when the aisle is created and
only appear on the read model.
"""

from typing import List

from pydantic import Field

from .common import BoundsMixin


class AisleCreate(BoundsMixin):
    """Schema for creating an aisle."""

    number: int = Field(..., examples=[3])
    name: str = Field(..., examples=["Cereal"])


class AisleRead(AisleCreate):
    """Schema for reading an aisle, including its computed bays."""

    id: str
    bays: List[List[int]]
