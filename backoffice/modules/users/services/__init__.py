"""
Business Logic Services

Services contain business logic and orchestrate repository calls.
"""

from .admin_dashboard import AdminDashboard, AdminDashboardService
from .directory_search import DirectorySearchService
from .order_listing import OrderListingService
from .policies import OPERATION_POLICIES, FailurePolicy, guarded
from .role_resolver import RoleResolver
from .status_mutator import StatusMutator
from .verification_adjudicator import VerificationAdjudicator

__all__ = [
    "AdminDashboard",
    "AdminDashboardService",
    "DirectorySearchService",
    "OrderListingService",
    "OPERATION_POLICIES",
    "FailurePolicy",
    "guarded",
    "RoleResolver",
    "StatusMutator",
    "VerificationAdjudicator",
]
