"""Pydantic models for checkout lanes."""

from pydantic import Field

from .common import BoundsMixin


class CheckoutCreate(BoundsMixin):
    """Schema for creating a checkout lane.  Lane numbers need not be unique."""

    lane: int = Field(..., examples=[1])


class CheckoutRead(CheckoutCreate):
    id: str
