"""
Profile Domain Models
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .enums import ClosedEnum


class ProfileRole(ClosedEnum):
    ADMIN = "admin"
    MODERATOR = "moderator"
    STAFF = "staff"
    ENTREPRENEUR = "entrepreneur"
    INVESTOR = "investor"
    BUYER = "buyer"


class ProfileStatus(ClosedEnum):
    ACTIVE = "active"
    SUSPENDED = "suspended"
    PENDING = "pending"


@dataclass
class Profile:
    """Authoritative user account record."""
    id: str
    full_name: Optional[str]
    email: Optional[str]
    phone: Optional[str]
    role: str
    status: str
    type: Optional[str] = None
    revision: int = 0
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Profile":
        """Create Profile from a database row."""
        return cls(
            id=data["id"],
            full_name=data.get("full_name"),
            email=data.get("email"),
            phone=data.get("phone"),
            role=data.get("role") or ProfileRole.BUYER.value,
            status=data.get("status") or ProfileStatus.PENDING.value,
            type=data.get("type"),
            revision=data.get("revision") or 0,
            updated_at=data.get("updated_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
            "phone": self.phone,
            "role": self.role,
            "status": self.status,
            "type": self.type,
            "revision": self.revision,
            "updated_at": self.updated_at,
        }


@dataclass(frozen=True)
class SearchResult:
    """Per-query projection of a Profile; never stored."""
    id: str
    full_name: Optional[str]
    email: Optional[str]
    phone: Optional[str]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchResult":
        return cls(
            id=data["id"],
            full_name=data.get("full_name"),
            email=data.get("email"),
            phone=data.get("phone"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "full_name": self.full_name,
            "email": self.email,
            "phone": self.phone,
        }
