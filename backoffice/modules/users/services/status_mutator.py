"""
Status Mutator

Applies validated status/type changes to a single profile.
"""
import logging
from typing import Any, Dict, Mapping, Optional

from backoffice.modules.audit_manager import AuditManager
from backoffice.modules.users.domain.profile import ProfileStatus
from backoffice.modules.users.domain.results import MutationResult
from backoffice.modules.users.errors import InvalidInputError
from backoffice.modules.users.repositories.profile_repository import ProfileRepository
from backoffice.modules.users.services.policies import guarded
from backoffice.modules.view_cache import ViewInvalidator

logger = logging.getLogger("backoffice.users.status_mutator")

PROFILE_ENTITY = "profile"
_ACCEPTED_KEYS = {"status", "type", "expected_revision"}


def _actor(user_context: Optional[Dict[str, Any]]) -> str:
    return str(user_context.get("user_id", "system")) if user_context else "system"


class StatusMutator:
    """
    Changes profile status and type on behalf of an administrator.

    Without ``expected_revision`` the last writer wins. With it, the update
    only lands if nobody else wrote the row since the caller read it.
    """

    def __init__(
        self,
        repository: ProfileRepository,
        invalidator: ViewInvalidator,
        audit: Optional[AuditManager] = None,
    ):
        self.repository = repository
        self.invalidator = invalidator
        self.audit = audit

    @staticmethod
    def validate_updates(updates: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
        """Normalize the partial update; raises InvalidInputError."""
        if not updates:
            raise InvalidInputError("No updates provided")

        unknown = set(updates) - _ACCEPTED_KEYS
        if unknown:
            raise InvalidInputError(f"Unsupported profile fields: {', '.join(sorted(unknown))}")

        changes: Dict[str, Any] = {}
        if updates.get("status") is not None:
            changes["status"] = ProfileStatus.parse(updates["status"]).value
        if updates.get("type") is not None:
            if not isinstance(updates["type"], str):
                raise InvalidInputError("Profile type must be a string")
            changes["type"] = updates["type"]

        if not changes:
            raise InvalidInputError("No updates provided")
        return changes

    @guarded("update_user_status")
    async def update_user_status(
        self,
        profile_id: str,
        updates: Optional[Mapping[str, Any]],
        user_context: Optional[Dict[str, Any]] = None,
    ) -> MutationResult:
        """Write the provided fields, then invalidate the profile's views."""
        changes = self.validate_updates(updates)
        expected_revision = updates.get("expected_revision")
        if expected_revision is not None and (
            isinstance(expected_revision, bool) or not isinstance(expected_revision, int)
        ):
            raise InvalidInputError("expected_revision must be an integer")

        logger.debug(f"[StatusMutator.update_user_status] profile_id={profile_id}, changes={changes}")
        revision = await self.repository.update_fields(
            profile_id, changes, expected_revision=expected_revision
        )

        await self._record("UPDATE_STATUS", profile_id, {**changes, "revision": revision}, user_context)
        self.invalidator.invalidate_entity(PROFILE_ENTITY, profile_id)
        return MutationResult.ok()

    @guarded("revert_verification")
    async def revert_verification(
        self,
        profile_id: str,
        user_context: Optional[Dict[str, Any]] = None,
    ) -> MutationResult:
        """Put a verified profile back to pending. Existing reports are kept as history."""
        revision = await self.repository.update_fields(
            profile_id, {"status": ProfileStatus.PENDING.value}
        )

        await self._record(
            "REVERT_VERIFICATION", profile_id,
            {"status": ProfileStatus.PENDING.value, "revision": revision}, user_context,
        )
        self.invalidator.invalidate_entity(PROFILE_ENTITY, profile_id)
        return MutationResult.ok()

    async def _record(
        self,
        action: str,
        profile_id: str,
        details: Dict[str, Any],
        user_context: Optional[Dict[str, Any]],
    ) -> None:
        if self.audit is None:
            return
        await self.audit.log_event(
            user_id=_actor(user_context),
            action=action,
            resource_type="PROFILE",
            resource_id=profile_id,
            details=details,
        )
