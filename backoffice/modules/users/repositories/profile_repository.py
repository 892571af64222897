"""
Profile Repository

Handles all database operations for the profiles table.
"""
import logging
from typing import Any, Dict, List, Optional

from databases import Database

from backoffice.modules.users.errors import ConcurrentUpdateError, RecordNotFoundError

logger = logging.getLogger("backoffice.users.profile_repository")

MUTABLE_FIELDS = ("status", "type")


def escape_like(value: str) -> str:
    """Escape LIKE wildcards so user input matches literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class ProfileRepository:
    """Repository for profile data access."""

    def __init__(self, database: Database):
        self.database = database

    async def search(self, text: str, limit: int = 5) -> List[Dict[str, Any]]:
        """
        Case-insensitive substring match on email OR full name.

        Postgres folds case with ILIKE, which covers non-ASCII letters.
        SQLite's LOWER and LIKE fold ASCII letters only.
        """
        if self.database.url.dialect in ("postgresql", "postgres"):
            query = """
                SELECT id, full_name, email, phone
                FROM profiles
                WHERE email ILIKE :pattern ESCAPE '\\'
                   OR full_name ILIKE :pattern ESCAPE '\\'
                LIMIT :limit
            """
        else:
            query = """
                SELECT id, full_name, email, phone
                FROM profiles
                WHERE LOWER(email) LIKE :pattern ESCAPE '\\'
                   OR LOWER(full_name) LIKE :pattern ESCAPE '\\'
                LIMIT :limit
            """
        pattern = f"%{escape_like(text.lower())}%"
        rows = await self.database.fetch_all(query, {"pattern": pattern, "limit": limit})
        return [dict(row) for row in rows]

    async def get_by_id(self, profile_id: str) -> Optional[Dict[str, Any]]:
        query = """
            SELECT id, full_name, email, phone, role, status, type, revision, updated_at
            FROM profiles
            WHERE id = :profile_id
        """
        row = await self.database.fetch_one(query, {"profile_id": profile_id})
        if not row:
            return None
        return dict(row)

    async def get_role(self, profile_id: str) -> Optional[str]:
        query = "SELECT role FROM profiles WHERE id = :profile_id"
        return await self.database.fetch_val(query, {"profile_id": profile_id})

    async def get_revision(self, profile_id: str) -> Optional[int]:
        query = "SELECT revision FROM profiles WHERE id = :profile_id"
        return await self.database.fetch_val(query, {"profile_id": profile_id})

    async def update_fields(
        self,
        profile_id: str,
        updates: Dict[str, Any],
        expected_revision: Optional[int] = None,
    ) -> int:
        """
        Apply ``updates`` to one profile in a single-row UPDATE.

        Only status and type are writable. When ``expected_revision`` is
        given the write is a compare-and-swap on the revision counter.
        Returns the new revision.
        """
        set_clauses = []
        values: Dict[str, Any] = {"profile_id": profile_id}

        for field in MUTABLE_FIELDS:
            if field in updates:
                set_clauses.append(f"{field} = :{field}")
                values[field] = updates[field]

        if not set_clauses:
            raise ValueError("No mutable profile fields in update")

        set_clauses.append("revision = revision + 1")
        set_clauses.append("updated_at = CURRENT_TIMESTAMP")

        query = f"UPDATE profiles SET {', '.join(set_clauses)} WHERE id = :profile_id"
        if expected_revision is not None:
            query += " AND revision = :expected_revision"
            values["expected_revision"] = expected_revision
        query += " RETURNING revision"

        rows = await self.database.fetch_all(query, values)
        if rows:
            return rows[0]["revision"]

        if expected_revision is not None and await self.get_revision(profile_id) is not None:
            raise ConcurrentUpdateError("Profile", profile_id, expected_revision)
        raise RecordNotFoundError("Profile", profile_id)

    async def list_recent(self, limit: int = 50) -> List[Dict[str, Any]]:
        query = """
            SELECT id, full_name, email, phone, role, status, type, revision, updated_at
            FROM profiles
            ORDER BY updated_at DESC
            LIMIT :limit
        """
        rows = await self.database.fetch_all(query, {"limit": limit})
        return [dict(row) for row in rows]
