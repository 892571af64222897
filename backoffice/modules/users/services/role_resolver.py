"""
Role Resolver

Maps an authenticated principal to its authorization role.
"""
import logging
from typing import Optional

from backoffice.modules.users.domain.profile import ProfileRole
from backoffice.modules.users.errors import InvalidInputError
from backoffice.modules.users.repositories.profile_repository import ProfileRepository
from backoffice.modules.users.services.policies import guarded

logger = logging.getLogger("backoffice.users.roles")


class RoleResolver:
    """Service for principal -> role lookups."""

    def __init__(self, repository: ProfileRepository):
        self.repository = repository

    @guarded("resolve_role", fallback=lambda: None)
    async def resolve(self, principal_id: Optional[str]) -> Optional[ProfileRole]:
        """Role of ``principal_id``, or None when unknown or unreadable."""
        if not principal_id:
            return None

        role = await self.repository.get_role(principal_id)
        if role is None:
            logger.warning(f"[RoleResolver.resolve] No profile for principal {principal_id}")
            return None

        try:
            return ProfileRole.parse(role)
        except InvalidInputError:
            logger.warning(f"[RoleResolver.resolve] Unrecognized role '{role}' for principal {principal_id}")
            return None
