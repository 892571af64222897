"""
Admin API Endpoints

Profile search, profile moderation, report adjudication and the admin dashboard.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel

from backoffice.container import BackofficeContainer
from backoffice.modules.users.api.responses import mutation_response
from backoffice.modules.users.auth.middleware import Principal, get_container, require_admin

logger = logging.getLogger("backoffice.users.api.admin")

router = APIRouter(prefix="/api/admin", tags=["admin"])


# Request Models
class UpdateProfileRequest(BaseModel):
    status: Optional[str] = None
    type: Optional[str] = None
    expected_revision: Optional[int] = None


class UpdateVerificationRequest(BaseModel):
    status: str


@router.get("/profiles/search")
async def search_profiles(
    q: str = Query("", description="Partial email or full name, at least 3 characters"),
    principal: Principal = Depends(require_admin),
    container: BackofficeContainer = Depends(get_container),
):
    """Return up to five matching profiles."""
    results = await container.directory_search.search_profiles(q)
    profiles = [result.to_dict() for result in results]
    return {"profiles": profiles, "count": len(profiles)}


@router.patch("/profiles/{profile_id}")
async def update_profile(
    profile_id: str,
    request: UpdateProfileRequest,
    principal: Principal = Depends(require_admin),
    container: BackofficeContainer = Depends(get_container),
):
    """Change a profile's status and/or type."""
    updates = request.model_dump(exclude_none=True)
    logger.debug(f"[admin_endpoints.update_profile] profile_id={profile_id}, fields={list(updates.keys())}")

    result = await container.status_mutator.update_user_status(
        profile_id, updates, user_context=principal.user_context()
    )
    return mutation_response(result)


@router.post("/profiles/{profile_id}/revert-verification")
async def revert_verification(
    profile_id: str,
    principal: Principal = Depends(require_admin),
    container: BackofficeContainer = Depends(get_container),
):
    """Put a profile back to pending verification."""
    result = await container.status_mutator.revert_verification(
        profile_id, user_context=principal.user_context()
    )
    return mutation_response(result)


@router.patch("/verification-reports/{report_id}")
async def update_verification_status(
    report_id: str,
    request: UpdateVerificationRequest,
    principal: Principal = Depends(require_admin),
    container: BackofficeContainer = Depends(get_container),
):
    """Approve or reject a verification report."""
    result = await container.verification_adjudicator.update_verification_status(
        report_id, request.status, user_context=principal.user_context()
    )
    return mutation_response(result)


@router.get("/dashboard")
async def get_dashboard(
    principal: Principal = Depends(require_admin),
    container: BackofficeContainer = Depends(get_container),
):
    dashboard = await container.admin_dashboard.load()
    return dashboard.to_dict()
