"""Checkout lane endpoints for API v1."""

from typing import List

from fastapi import APIRouter, HTTPException, status

from quickkart_api.app.schemas.checkout import CheckoutCreate, CheckoutRead
from quickkart_api.app.services.checkout_service import CheckoutService

router = APIRouter()


@router.get("/", response_model=List[CheckoutRead])
async def list_checkouts() -> List[CheckoutRead]:
    return await CheckoutService.list_checkouts()


@router.get("/{checkout_id}", response_model=CheckoutRead)
async def get_checkout(checkout_id: str) -> CheckoutRead:
    lane = await CheckoutService.get_checkout(checkout_id)
    if lane is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Checkout lane not found")
    return lane


@router.post("/", response_model=CheckoutRead, status_code=status.HTTP_201_CREATED)
async def create_checkout(checkout_in: CheckoutCreate) -> CheckoutRead:
    """Create a checkout lane.  Placement is checked only when a map is created."""
    return await CheckoutService.create_checkout(checkout_in)
