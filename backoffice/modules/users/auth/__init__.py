"""
Authentication and Authorization Module

Provides:
- Principal extraction from the session header
- Role-based access control (RBAC) dependencies
"""

from .middleware import (
    Principal,
    get_container,
    get_current_principal,
    require_admin,
    require_entrepreneur,
    require_role,
)

__all__ = [
    "Principal",
    "get_container",
    "get_current_principal",
    "require_admin",
    "require_entrepreneur",
    "require_role",
]
