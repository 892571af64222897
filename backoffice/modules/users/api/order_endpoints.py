"""
Entrepreneur Order Endpoints
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from backoffice.container import BackofficeContainer
from backoffice.modules.users.api.responses import mutation_response
from backoffice.modules.users.auth.middleware import Principal, get_container, require_entrepreneur

logger = logging.getLogger("backoffice.users.api.orders")

router = APIRouter(prefix="/api/entrepreneur/orders", tags=["orders"])


class UpdateOrderRequest(BaseModel):
    status: str
    estimated_delivery_date: Optional[str] = None


@router.get("")
async def list_orders(
    principal: Principal = Depends(require_entrepreneur),
    container: BackofficeContainer = Depends(get_container),
):
    """Orders received by the entrepreneur in session, newest first."""
    listing = await container.order_listing.list_entrepreneur_orders(principal.id)
    return listing.to_dict()


@router.patch("/{order_id}")
async def update_order(
    order_id: str,
    request: UpdateOrderRequest,
    principal: Principal = Depends(require_entrepreneur),
    container: BackofficeContainer = Depends(get_container),
):
    result = await container.order_listing.update_order_status(
        principal.id,
        order_id,
        request.status,
        estimated_delivery_date=request.estimated_delivery_date,
    )
    return mutation_response(result)
