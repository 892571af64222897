"""
Back Office Errors

Raised inside services and repositories; converted to results at the
service boundary by the failure policy (see services/policies.py).
"""


class BackofficeError(Exception):
    """Base class for back-office failures."""


class InvalidInputError(BackofficeError, ValueError):
    """Input rejected before any storage call."""


class RecordNotFoundError(BackofficeError):
    """The addressed row does not exist."""

    def __init__(self, resource_type: str, resource_id: str):
        self.resource_type = resource_type
        self.resource_id = resource_id
        super().__init__(f"{resource_type} {resource_id} not found")


class ConcurrentUpdateError(BackofficeError):
    """Compare-and-swap on the row revision lost against another writer."""

    def __init__(self, resource_type: str, resource_id: str, expected_revision: int):
        self.resource_type = resource_type
        self.resource_id = resource_id
        self.expected_revision = expected_revision
        super().__init__(
            f"{resource_type} {resource_id} was modified concurrently "
            f"(expected revision {expected_revision})"
        )
