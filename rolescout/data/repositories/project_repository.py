"""
Project catalog repository for RoleScout.

Provides the two candidate queries used by role suggestion: projects
with open casting calls in a set of locations, and projects with active
talent requirements. Both apply the same candidacy filter.
"""

from typing import Any, Iterable, Optional

from bson import ObjectId

from rolescout.data.models.project import Project, Studio
from rolescout.utils.constants import CLOSED_PROJECT_STATUSES, CastingCallStatus
from rolescout.utils.logger import get_logger

from .base import BaseRepository

logger = get_logger(__name__)


def candidacy_filter() -> dict[str, Any]:
    """Projects that are neither archived nor finished."""
    return {
        "is_archived": False,
        "status": {"$nin": [s.value for s in CLOSED_PROJECT_STATUSES]},
    }


class ProjectRepository(BaseRepository[Project]):
    """Repository for project documents and their embedded roles."""

    @property
    def collection_name(self) -> str:
        return "projects"

    @property
    def model_class(self) -> type[Project]:
        return Project

    async def find_with_open_casting_calls_async(
        self, location_ids: Iterable[str | ObjectId]
    ) -> list[Project]:
        """
        Get candidate projects with at least one OPEN casting call located
        in one of `location_ids`.

        The returned projects' `casting_calls` are narrowed to those
        qualifying calls and their `talent_requirements` are cleared.
        """
        object_ids = self._to_object_ids(location_ids)
        if not object_ids:
            return []

        query = candidacy_filter()
        query["casting_calls"] = {
            "$elemMatch": {
                "status": CastingCallStatus.OPEN.value,
                "location_id": {"$in": object_ids},
            }
        }
        projects = await self.find_async(query)

        allowed = set(object_ids)
        narrowed = [
            p.model_copy(
                update={
                    "casting_calls": p.open_casting_calls_in(allowed),
                    "talent_requirements": [],
                }
            )
            for p in projects
        ]
        logger.debug(f"{len(narrowed)} projects with open casting calls in {len(allowed)} locations")
        return narrowed

    async def find_with_active_requirements_async(self) -> list[Project]:
        """
        Get candidate projects with at least one active talent requirement.

        The returned projects' `talent_requirements` are narrowed to the
        active ones and their `casting_calls` are cleared.
        """
        query = candidacy_filter()
        query["talent_requirements"] = {"$elemMatch": {"is_active": True}}
        projects = await self.find_async(query)

        narrowed = [
            p.model_copy(
                update={
                    "talent_requirements": p.active_requirements,
                    "casting_calls": [],
                }
            )
            for p in projects
        ]
        logger.debug(f"{len(narrowed)} projects with active talent requirements")
        return narrowed


class StudioRepository(BaseRepository[Studio]):
    """Repository for studio documents."""

    @property
    def collection_name(self) -> str:
        return "studios"

    @property
    def model_class(self) -> type[Studio]:
        return Studio


# Singleton instances
_project_repository: Optional[ProjectRepository] = None
_studio_repository: Optional[StudioRepository] = None


def get_project_repository() -> ProjectRepository:
    """Get the project repository singleton instance."""
    global _project_repository
    if _project_repository is None:
        _project_repository = ProjectRepository()
    return _project_repository


def get_studio_repository() -> StudioRepository:
    """Get the studio repository singleton instance."""
    global _studio_repository
    if _studio_repository is None:
        _studio_repository = StudioRepository()
    return _studio_repository
