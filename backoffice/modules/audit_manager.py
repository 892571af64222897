import logging
import json
import uuid
from typing import Dict, Any, Optional

from databases import Database

logger = logging.getLogger("backoffice.audit")


class AuditManager:
    """
    Centralized Audit System.
    Records every moderation mutation with the acting user.

    The audit row is written separately from the mutated row; there is no
    transaction spanning both.
    """

    def __init__(self, database: Database):
        self.database = database

    async def log_event(
        self,
        user_id: str,
        action: str,
        resource_type: str,
        resource_id: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> Optional[str]:
        """
        Writes an audit record to the DB. Returns the event id, or None on failure.
        """
        event_id = str(uuid.uuid4())
        try:
            query = """
            INSERT INTO audit_logs
            (id, user_id, action, resource_type, resource_id, details)
            VALUES (:id, :uid, :act, :rtype, :rid, :det)
            """

            details_json = json.dumps(details, default=str) if details else "{}"

            await self.database.execute(query, {
                "id": event_id,
                "uid": user_id,
                "act": action,
                "rtype": resource_type,
                "rid": str(resource_id),
                "det": details_json,
            })

            logger.info(f"AUDIT [{user_id}] {action} {resource_type}:{resource_id}")
            return event_id

        except Exception as e:
            # Don't fail the mutation if audit fails, but log heavily
            logger.critical(f"AUDIT FAILURE: {e} - Data: {user_id} {action} {resource_type}:{resource_id}")
            return None

    async def list_events(self, resource_type: str, resource_id: str) -> list:
        query = """
        SELECT id, user_id, action, resource_type, resource_id, details, created_at
        FROM audit_logs
        WHERE resource_type = :rtype AND resource_id = :rid
        ORDER BY created_at
        """
        rows = await self.database.fetch_all(query, {"rtype": resource_type, "rid": str(resource_id)})
        events = []
        for row in rows:
            event = dict(row)
            event["details"] = json.loads(event["details"]) if event.get("details") else {}
            events.append(event)
        return events
