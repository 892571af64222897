"""
Authentication Middleware

FastAPI dependencies for the session principal and role gating.
"""
import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException, Request

from backoffice.container import BackofficeContainer
from backoffice.modules.users.domain.profile import ProfileRole

logger = logging.getLogger("backoffice.users.auth")


@dataclass(frozen=True)
class Principal:
    """The authenticated caller and its resolved role."""
    id: str
    role: ProfileRole

    def user_context(self) -> dict:
        """Context dictionary for audit logs."""
        return {"user_id": self.id}


def get_container(request: Request) -> BackofficeContainer:
    return request.app.state.container


async def get_principal_id(
    x_user_id: Optional[str] = Header(None, alias="X-User-ID")
) -> Optional[str]:
    """
    Extract the principal id from the X-User-ID header.

    Token validation happens upstream at the identity provider's edge.
    """
    return x_user_id


async def get_current_principal(
    principal_id: Optional[str] = Depends(get_principal_id),
    container: BackofficeContainer = Depends(get_container),
) -> Principal:
    """
    FastAPI dependency to get the current authenticated principal.

    Raises HTTPException if the header is missing or no role can be resolved.
    """
    if not principal_id:
        raise HTTPException(
            status_code=401,
            detail="Authentication required. Missing X-User-ID header."
        )

    role = await container.role_resolver.resolve(principal_id)
    if role is None:
        raise HTTPException(
            status_code=403,
            detail="No role could be resolved for this principal"
        )

    return Principal(id=principal_id, role=role)


def require_role(*roles: ProfileRole):
    """Build a dependency that admits only the given roles."""
    async def dependency(principal: Principal = Depends(get_current_principal)) -> Principal:
        if principal.role not in roles:
            logger.info(f"[require_role] principal {principal.id} with role {principal.role.value} denied")
            raise HTTPException(
                status_code=403,
                detail=f"{' or '.join(role.value for role in roles).capitalize()} access required"
            )
        return principal
    return dependency


require_admin = require_role(ProfileRole.ADMIN)
require_entrepreneur = require_role(ProfileRole.ENTREPRENEUR)
