"""
View Change Notifications

Entry point for writers outside this service (registration, order
placement) to mark the views that render their entity stale.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from backoffice.container import BackofficeContainer
from backoffice.modules.users.api.responses import mutation_response
from backoffice.modules.users.auth.middleware import Principal, get_container, get_current_principal
from backoffice.modules.users.domain.results import MutationResult

logger = logging.getLogger("backoffice.users.api.views")

router = APIRouter(prefix="/api/views", tags=["views"])


class ChangeNotice(BaseModel):
    entity_type: str
    entity_id: Optional[str] = None


@router.post("/changes")
async def notify_change(
    notice: ChangeNotice,
    principal: Principal = Depends(get_current_principal),
    container: BackofficeContainer = Depends(get_container),
):
    """Invalidate every view registered for the changed entity type."""
    if not container.invalidator.views_for(notice.entity_type):
        return mutation_response(MutationResult.failed(f"Unknown entity type: {notice.entity_type}"))

    paths = container.invalidator.invalidate_entity(notice.entity_type, notice.entity_id)
    logger.info(f"[view_endpoints.notify_change] {notice.entity_type} {notice.entity_id} from {principal.id}")
    return {"success": True, "invalidated": list(paths)}
