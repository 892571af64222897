"""
Admin Dashboard

The cached /admin view: recent profiles and verification reports.
Writers outside this service refresh it through a view change notice.
"""
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

from backoffice.modules.users.domain.profile import Profile
from backoffice.modules.users.domain.verification import VerificationReport
from backoffice.modules.users.repositories.profile_repository import ProfileRepository
from backoffice.modules.users.repositories.verification_repository import VerificationRepository
from backoffice.modules.users.services.policies import guarded
from backoffice.modules.view_cache import ADMIN_VIEW, ViewCache

logger = logging.getLogger("backoffice.users.dashboard")


@dataclass
class AdminDashboard:
    profiles: List[Profile] = field(default_factory=list)
    reports: List[VerificationReport] = field(default_factory=list)
    degraded: bool = False

    @classmethod
    def unavailable(cls) -> "AdminDashboard":
        return cls(degraded=True)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "profiles": [profile.to_dict() for profile in self.profiles],
            "reports": [report.to_dict() for report in self.reports],
            "degraded": self.degraded,
        }


class AdminDashboardService:
    def __init__(
        self,
        profiles: ProfileRepository,
        reports: VerificationRepository,
        cache: ViewCache,
        limit: int = 50,
    ):
        self.profiles = profiles
        self.reports = reports
        self.cache = cache
        self.limit = limit

    @guarded("load_admin_dashboard", fallback=AdminDashboard.unavailable)
    async def load(self) -> AdminDashboard:
        async def build() -> AdminDashboard:
            profile_rows = await self.profiles.list_recent(limit=self.limit)
            report_rows = await self.reports.list_recent(limit=self.limit)
            return AdminDashboard(
                profiles=[Profile.from_dict(row) for row in profile_rows],
                reports=[VerificationReport.from_dict(row) for row in report_rows],
            )

        return await self.cache.get_or_load(ADMIN_VIEW, build)
