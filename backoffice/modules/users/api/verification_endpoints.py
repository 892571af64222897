"""
Verification Submission Endpoint
"""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from backoffice.container import BackofficeContainer
from backoffice.modules.users.api.responses import mutation_response
from backoffice.modules.users.auth.middleware import Principal, get_container, get_current_principal

logger = logging.getLogger("backoffice.users.api.verification")

router = APIRouter(prefix="/api/verification-reports", tags=["verification"])


class SubmitReportRequest(BaseModel):
    # Missing text is rejected by the service with its own message.
    report_text: str = ""


@router.post("")
async def submit_report(
    request: SubmitReportRequest,
    principal: Principal = Depends(get_current_principal),
    container: BackofficeContainer = Depends(get_container),
):
    """Submit verification evidence for the calling principal."""
    result = await container.verification_adjudicator.submit_report(
        principal.id, report_text=request.report_text
    )
    return mutation_response(result)
