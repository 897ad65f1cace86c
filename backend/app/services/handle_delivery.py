"""Delivery Handlers — read-only listing filtered by address and sale."""

import logging
from typing import Any, Mapping, Sequence

from app.core.filter_config import DELIVERY_FILTERS, build_filters
from app.core.repository_protocols import DeliveryRepository


class DeliveryHandlers:

    def __init__(self, deliveries: DeliveryRepository, logger: logging.Logger):
        self.deliveries = deliveries
        self.logger = logger

    async def list_deliveries(self, params: Mapping[str, Any]) -> Sequence[Any]:
        filters = build_filters(DELIVERY_FILTERS, params)
        found = await self.deliveries.find_all(filters)
        self.logger.info(f"Listing deliveries: {len(found)} found")
        return found
