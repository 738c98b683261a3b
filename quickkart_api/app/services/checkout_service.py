"""Business logic for checkout lanes."""

import logging
from typing import List, Optional

from ..core.db import CHECKOUTS, get_store, parse_object_id
from ..schemas.checkout import CheckoutCreate, CheckoutRead
from .documents import shape_document

logger = logging.getLogger(__name__)


class CheckoutService:
    """Create and look up checkout lanes.

    Lanes are stored verbatim; placement is only checked later, when a
    map that embeds them is created.
    """

    @classmethod
    async def create_checkout(cls, data: CheckoutCreate) -> CheckoutRead:
        created = await get_store().insert_one(CHECKOUTS, data.model_dump(by_alias=True))
        lane = CheckoutRead.model_validate(shape_document(created))
        logger.info("Created checkout lane %s (lane %s)", lane.id, lane.lane)
        return lane

    @classmethod
    async def get_checkout(cls, checkout_id: str) -> Optional[CheckoutRead]:
        object_id = parse_object_id(checkout_id)
        if object_id is None:
            return None
        document = await get_store().find_one(CHECKOUTS, {"_id": object_id})
        if document is None:
            return None
        return CheckoutRead.model_validate(shape_document(document))

    @classmethod
    async def list_checkouts(cls) -> List[CheckoutRead]:
        documents = await get_store().find_all(CHECKOUTS)
        return [CheckoutRead.model_validate(shape_document(doc)) for doc in documents]
