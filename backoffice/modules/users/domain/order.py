"""
Order Domain Models
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from .enums import ClosedEnum


class OrderStatus(ClosedEnum):
    PENDING = "pending"
    PAID = "paid"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    DISPUTE = "dispute"


@dataclass
class Order:
    """Marketplace transaction; read-only except for its status."""
    id: str
    entrepreneur_id: str
    status: str
    buyer_id: Optional[str] = None
    estimated_delivery_date: Optional[str] = None
    created_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Order":
        return cls(
            id=data["id"],
            entrepreneur_id=data["entrepreneur_id"],
            status=data.get("status") or OrderStatus.PENDING.value,
            buyer_id=data.get("buyer_id"),
            estimated_delivery_date=data.get("estimated_delivery_date"),
            created_at=data.get("created_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "entrepreneur_id": self.entrepreneur_id,
            "buyer_id": self.buyer_id,
            "status": self.status,
            "estimated_delivery_date": self.estimated_delivery_date,
            "created_at": self.created_at,
        }


@dataclass
class OrderListing:
    """
    Orders for one entrepreneur.

    ``degraded`` separates "storage failed" from "no orders yet"; both
    carry an empty ``orders`` list.
    """
    orders: List[Order] = field(default_factory=list)
    degraded: bool = False

    @classmethod
    def unavailable(cls) -> "OrderListing":
        return cls(orders=[], degraded=True)

    @property
    def is_empty(self) -> bool:
        return not self.orders

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "orders": [order.to_dict() for order in self.orders],
            "count": len(self.orders),
            "degraded": self.degraded,
        }
        if self.is_empty and not self.degraded:
            payload["message"] = "No orders received yet."
        return payload
