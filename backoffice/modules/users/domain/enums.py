"""
Closed enumerations validated at the service boundary.
"""
from enum import Enum
from typing import Any

from backoffice.modules.users.errors import InvalidInputError


class ClosedEnum(str, Enum):
    """String enum that rejects unrecognized values with InvalidInputError."""

    @classmethod
    def parse(cls, value: Any) -> "ClosedEnum":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            for member in cls:
                if member.value == normalized:
                    return member
        allowed = ", ".join(member.value for member in cls)
        raise InvalidInputError(f"Invalid {cls.__name__} '{value}'. Expected one of: {allowed}")
