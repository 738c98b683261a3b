"""
Pydantic models for inventory items.

An item records where a product sits on the shelf.  ``aisle`` and
``bay`` are free-form labels and are not checked against existing
aisles.
"""

from pydantic import Field

from .common import CamelModel


class ItemBase(CamelModel):
    name: str = Field(..., examples=["Whole Milk 1L"])
    aisle: str = Field(..., examples=["Dairy"])
    bay: str = Field(..., examples=["2"])
    price: float = Field(..., ge=0, examples=[1.49])
    x_val: int = Field(..., examples=[12])
    y_val: int = Field(..., examples=[4])


class ItemCreate(ItemBase):
    """Schema for creating an item."""
    pass


class ItemRead(ItemBase):
    """Schema for reading an item from the API."""

    id: str
