"""
Verification Report Repository

Handles all database operations for the verification_reports table.
"""
import logging
import uuid
from typing import Any, Dict, List, Optional

from databases import Database

from backoffice.modules.users.errors import RecordNotFoundError

logger = logging.getLogger("backoffice.users.verification_repository")


class VerificationRepository:
    """Repository for verification report data access."""

    def __init__(self, database: Database):
        self.database = database

    async def get_by_id(self, report_id: str) -> Optional[Dict[str, Any]]:
        query = """
            SELECT id, profile_id, report_text, status, created_at, updated_at
            FROM verification_reports
            WHERE id = :report_id
        """
        row = await self.database.fetch_one(query, {"report_id": report_id})
        if not row:
            return None
        return dict(row)

    async def create(self, profile_id: str, report_text: Optional[str], status: str) -> str:
        """Insert a report and return its id."""
        report_id = str(uuid.uuid4())
        query = """
            INSERT INTO verification_reports (id, profile_id, report_text, status)
            VALUES (:id, :profile_id, :report_text, :status)
        """
        await self.database.execute(query, {
            "id": report_id,
            "profile_id": profile_id,
            "report_text": report_text,
            "status": status,
        })
        return report_id

    async def update_status(self, report_id: str, status: str) -> None:
        """Overwrite the status of one report."""
        query = """
            UPDATE verification_reports
            SET status = :status, updated_at = CURRENT_TIMESTAMP
            WHERE id = :report_id
            RETURNING id
        """
        updated = await self.database.fetch_all(query, {"report_id": report_id, "status": status})
        if not updated:
            raise RecordNotFoundError("VerificationReport", report_id)

    async def list_recent(self, status: Optional[str] = None, limit: int = 50) -> List[Dict[str, Any]]:
        query = """
            SELECT id, profile_id, report_text, status, created_at, updated_at
            FROM verification_reports
            WHERE 1=1
        """
        values: Dict[str, Any] = {"limit": limit}
        if status:
            query += " AND status = :status"
            values["status"] = status
        query += " ORDER BY created_at DESC LIMIT :limit"
        rows = await self.database.fetch_all(query, values)
        return [dict(row) for row in rows]
