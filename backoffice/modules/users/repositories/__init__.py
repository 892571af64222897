"""
Data Access Layer (Repositories)

Repositories handle all database interactions. Each one is handed the
storage client for its credential tier.
"""

from .profile_repository import ProfileRepository
from .verification_repository import VerificationRepository
from .order_repository import OrderRepository

__all__ = [
    "ProfileRepository",
    "VerificationRepository",
    "OrderRepository",
]
