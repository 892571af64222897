"""
Order Repository

Reads marketplace orders with the restricted client credential.
"""
import logging
from typing import Any, Dict, List, Optional

from databases import Database

from backoffice.modules.users.errors import RecordNotFoundError

logger = logging.getLogger("backoffice.users.order_repository")


class OrderRepository:
    """Repository for marketplace order data access."""

    def __init__(self, database: Database):
        self.database = database

    async def list_for_entrepreneur(self, entrepreneur_id: str) -> List[Dict[str, Any]]:
        query = """
            SELECT id, entrepreneur_id, buyer_id, status, estimated_delivery_date, created_at
            FROM marketplace_orders
            WHERE entrepreneur_id = :entrepreneur_id
            ORDER BY created_at DESC
        """
        rows = await self.database.fetch_all(query, {"entrepreneur_id": entrepreneur_id})
        return [dict(row) for row in rows]

    async def update_status(
        self,
        order_id: str,
        status: str,
        entrepreneur_id: str,
        estimated_delivery_date: Optional[str] = None,
    ) -> None:
        """Update one order owned by ``entrepreneur_id``."""
        set_clauses = ["status = :status"]
        values: Dict[str, Any] = {
            "order_id": order_id,
            "status": status,
            "entrepreneur_id": entrepreneur_id,
        }
        if estimated_delivery_date:
            set_clauses.append("estimated_delivery_date = :estimated_delivery_date")
            values["estimated_delivery_date"] = estimated_delivery_date

        query = f"""
            UPDATE marketplace_orders
            SET {', '.join(set_clauses)}
            WHERE id = :order_id AND entrepreneur_id = :entrepreneur_id
            RETURNING id
        """
        updated = await self.database.fetch_all(query, values)
        if not updated:
            raise RecordNotFoundError("Order", order_id)
