"""
Verification Adjudicator

Approves or rejects verification reports, and accepts new submissions.
"""
import logging
from typing import Any, Dict, Optional

from backoffice.modules.audit_manager import AuditManager
from backoffice.modules.users.domain.results import MutationResult
from backoffice.modules.users.domain.verification import ReportStatus
from backoffice.modules.users.errors import InvalidInputError
from backoffice.modules.users.repositories.verification_repository import VerificationRepository
from backoffice.modules.users.services.policies import guarded
from backoffice.modules.view_cache import ViewInvalidator

logger = logging.getLogger("backoffice.users.adjudicator")

REPORT_ENTITY = "verification_report"


class VerificationAdjudicator:
    """
    Overwrites report status.

    Any recognized status may replace any other; an approved report can be
    rejected later and vice versa.
    """

    def __init__(
        self,
        repository: VerificationRepository,
        invalidator: ViewInvalidator,
        audit: Optional[AuditManager] = None,
    ):
        self.repository = repository
        self.invalidator = invalidator
        self.audit = audit

    @guarded("update_verification_status")
    async def update_verification_status(
        self,
        report_id: str,
        status: str,
        user_context: Optional[Dict[str, Any]] = None,
    ) -> MutationResult:
        new_status = ReportStatus.parse(status)

        logger.debug(f"[VerificationAdjudicator.update_verification_status] report_id={report_id}, status={new_status.value}")
        await self.repository.update_status(report_id, new_status.value)

        if self.audit is not None:
            await self.audit.log_event(
                user_id=str(user_context.get("user_id", "system")) if user_context else "system",
                action="UPDATE_STATUS",
                resource_type="VERIFICATION_REPORT",
                resource_id=report_id,
                details={"status": new_status.value},
            )
        self.invalidator.invalidate_entity(REPORT_ENTITY, report_id)
        return MutationResult.ok()

    @guarded("submit_verification_report")
    async def submit_report(self, profile_id: str, report_text: str) -> MutationResult:
        """Create a pending report for ``profile_id``."""
        if not profile_id or not report_text or not report_text.strip():
            raise InvalidInputError("Missing required fields")

        report_id = await self.repository.create(
            profile_id=profile_id,
            report_text=report_text,
            status=ReportStatus.PENDING.value,
        )
        logger.info(f"[VerificationAdjudicator.submit_report] report {report_id} submitted for {profile_id}")

        if self.audit is not None:
            await self.audit.log_event(
                user_id=profile_id,
                action="CREATE",
                resource_type="VERIFICATION_REPORT",
                resource_id=report_id,
                details={"profile_id": profile_id},
            )
        self.invalidator.invalidate_entity(REPORT_ENTITY, report_id)
        return MutationResult.ok()
