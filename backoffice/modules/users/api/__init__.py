"""
API Endpoints

REST API endpoints for moderation, verification, order listing and view change notices.
"""

from .admin_endpoints import router as admin_router
from .verification_endpoints import router as verification_router
from .order_endpoints import router as order_router
from .view_endpoints import router as view_router

__all__ = [
    "admin_router",
    "verification_router",
    "order_router",
    "view_router",
]
