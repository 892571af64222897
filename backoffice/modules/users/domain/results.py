"""
Mutation Result

Tagged outcome returned by every write path.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class MutationResult:
    """Success, or failure carrying a human-readable message."""
    success: bool
    error: Optional[str] = None

    @classmethod
    def ok(cls) -> "MutationResult":
        return cls(success=True)

    @classmethod
    def failed(cls, message: str) -> "MutationResult":
        return cls(success=False, error=message or "Unknown error")

    def to_dict(self) -> Dict[str, Any]:
        if self.success:
            return {"success": True}
        return {"error": self.error}
