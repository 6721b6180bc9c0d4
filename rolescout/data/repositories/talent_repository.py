"""
Talent profile repository for RoleScout.
"""

from typing import Optional

from rolescout.data.models.talent import TalentProfile

from .base import BaseRepository


class TalentProfileRepository(BaseRepository[TalentProfile]):
    """Repository for talent profile documents."""

    @property
    def collection_name(self) -> str:
        return "talent_profiles"

    @property
    def model_class(self) -> type[TalentProfile]:
        return TalentProfile


# Singleton instance
_talent_repository: Optional[TalentProfileRepository] = None


def get_talent_repository() -> TalentProfileRepository:
    """Get the talent profile repository singleton instance."""
    global _talent_repository
    if _talent_repository is None:
        _talent_repository = TalentProfileRepository()
    return _talent_repository
