"""Region entitlement module."""

from .resolver import Entitlement, EntitlementResolver

__all__ = [
    "Entitlement",
    "EntitlementResolver",
]
