"""
Pydantic models for store maps.

A map embeds a copy of every aisle and checkout lane that existed when
it was created.  Width and length are deliberately plain integers here:
``MapService`` performs the dimension checks so that clients receive
the service's own error messages.
"""

from typing import List, Optional

from pydantic import Field

from .aisle import AisleRead
from .checkout import CheckoutRead
from .common import CamelModel


class MapCreate(CamelModel):
    """Schema for creating a map."""

    title: str = Field(..., examples=["Main Store"])
    description: str = Field(..., examples=["Ground floor layout"])
    width: int = Field(..., examples=[60])
    length: int = Field(..., examples=[40])


class MapRead(CamelModel):
    """Schema for reading a map and its embedded snapshot."""

    id: str
    title: str
    description: Optional[str] = None
    width: int
    length: int
    aisle: List[AisleRead] = []
    checkout: List[CheckoutRead] = []
