"""
Order Listing Service

Entrepreneur-scoped order reads, plus the entrepreneur's order status updates.
Orders are created outside this service, so the listing is read from
storage on every request.
"""
import logging
from typing import Optional

from backoffice.modules.users.domain.order import Order, OrderListing, OrderStatus
from backoffice.modules.users.domain.results import MutationResult
from backoffice.modules.users.errors import InvalidInputError
from backoffice.modules.users.repositories.order_repository import OrderRepository
from backoffice.modules.users.services.policies import guarded
from backoffice.modules.view_cache import ViewInvalidator

logger = logging.getLogger("backoffice.users.orders")

ORDER_ENTITY = "order"


class OrderListingService:
    """Reads and updates orders for the entrepreneur in session."""

    def __init__(self, repository: OrderRepository, invalidator: ViewInvalidator):
        self.repository = repository
        self.invalidator = invalidator

    @guarded("list_entrepreneur_orders", fallback=OrderListing.unavailable)
    async def list_entrepreneur_orders(self, entrepreneur_id: Optional[str]) -> OrderListing:
        """Newest first. A failed read is reported as ``degraded``."""
        if not entrepreneur_id:
            return OrderListing()

        rows = await self.repository.list_for_entrepreneur(entrepreneur_id)
        return OrderListing(orders=[Order.from_dict(row) for row in rows])

    @guarded("update_order_status")
    async def update_order_status(
        self,
        entrepreneur_id: str,
        order_id: str,
        status: str,
        estimated_delivery_date: Optional[str] = None,
    ) -> MutationResult:
        if not entrepreneur_id:
            raise InvalidInputError("Entrepreneur principal required")
        new_status = OrderStatus.parse(status)

        await self.repository.update_status(
            order_id,
            new_status.value,
            entrepreneur_id=entrepreneur_id,
            estimated_delivery_date=estimated_delivery_date,
        )
        logger.info(f"[OrderListingService.update_order_status] order {order_id} -> {new_status.value}")

        self.invalidator.invalidate_entity(ORDER_ENTITY, order_id)
        return MutationResult.ok()
