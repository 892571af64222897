"""
Domain Models

Pure data models and closed status enumerations.
"""

from .profile import Profile, ProfileRole, ProfileStatus, SearchResult
from .verification import ReportStatus, VerificationReport
from .order import Order, OrderListing, OrderStatus
from .results import MutationResult

__all__ = [
    "Profile",
    "ProfileRole",
    "ProfileStatus",
    "SearchResult",
    "ReportStatus",
    "VerificationReport",
    "Order",
    "OrderListing",
    "OrderStatus",
    "MutationResult",
]
