"""
Verification Report Domain Model
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .enums import ClosedEnum


class ReportStatus(ClosedEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


@dataclass
class VerificationReport:
    """Identity or business check tied to a profile by id."""
    id: str
    profile_id: str
    status: str
    report_text: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "VerificationReport":
        return cls(
            id=data["id"],
            profile_id=data["profile_id"],
            status=data.get("status") or ReportStatus.PENDING.value,
            report_text=data.get("report_text"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "profile_id": self.profile_id,
            "status": self.status,
            "report_text": self.report_text,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
