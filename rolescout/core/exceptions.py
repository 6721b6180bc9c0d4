"""
Exceptions raised by the role suggestion engine.

A talent without region subscriptions is not an error; the service
answers with an advisory message instead.
"""

from typing import Any


class RoleScoutError(Exception):
    """Base class for suggestion engine errors."""


class ProfileNotFoundError(RoleScoutError):
    """No talent profile exists for the requested identifier."""

    def __init__(self, talent_id: Any) -> None:
        self.talent_id = str(talent_id)
        super().__init__(f"Talent profile not found: {self.talent_id}")


class StoreFailureError(RoleScoutError):
    """
    A store query failed.

    The driver exception is chained as `__cause__`. No partial results
    accompany this error.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"Store query failed during {operation}")
