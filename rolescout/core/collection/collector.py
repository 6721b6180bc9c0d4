"""
Candidate collection.

Gathers the roles a talent could be suggested from two project queries
and merges them per project:

- projects with OPEN casting calls in the talent's entitled locations
- projects with active talent requirements (not location filtered)
"""

import asyncio
from dataclasses import dataclass, field
from typing import Iterable, Optional, TypeVar

from bson import ObjectId
from pymongo.errors import PyMongoError

from rolescout.core.exceptions import StoreFailureError
from rolescout.data.models.project import CastingCall, Project, Studio, TalentRequirement
from rolescout.data.models.region import Location
from rolescout.data.repositories import (
    LocationRepository,
    ProjectRepository,
    StudioRepository,
    get_location_repository,
    get_project_repository,
    get_studio_repository,
)
from rolescout.utils.logger import get_logger

logger = get_logger(__name__)

Role = TypeVar("Role", TalentRequirement, CastingCall)


def unique_by_id(rows: Iterable[Role], seen: Optional[set[ObjectId]] = None) -> list[Role]:
    """Rows in order, dropping any whose id was already seen."""
    seen = set() if seen is None else seen
    unique: list[Role] = []
    for row in rows:
        if row.id not in seen:
            seen.add(row.id)
            unique.append(row)
    return unique


@dataclass
class ProjectCandidates:
    """A project with the roles from it that are candidates for one talent."""

    project: Project
    requirements: list[TalentRequirement] = field(default_factory=list)
    casting_calls: list[CastingCall] = field(default_factory=list)

    @classmethod
    def from_casting_call_query(cls, project: Project) -> "ProjectCandidates":
        return cls(project=project, casting_calls=unique_by_id(project.casting_calls))

    @classmethod
    def from_requirement_query(cls, project: Project) -> "ProjectCandidates":
        return cls(project=project, requirements=unique_by_id(project.talent_requirements))

    def merge(self, other: "ProjectCandidates") -> None:
        """Union both role lists with `other`'s, skipping ids already present."""
        self.requirements.extend(
            unique_by_id(other.requirements, {r.id for r in self.requirements})
        )
        self.casting_calls.extend(
            unique_by_id(other.casting_calls, {c.id for c in self.casting_calls})
        )


def merge_candidates(
    casting_call_projects: Iterable[Project],
    requirement_projects: Iterable[Project],
) -> dict[ObjectId, ProjectCandidates]:
    """
    Merge the two query results by project id.

    Insertion order is casting-call projects first, then projects only
    found by the requirement query.
    """
    merged: dict[ObjectId, ProjectCandidates] = {}
    tagged = [ProjectCandidates.from_casting_call_query(p) for p in casting_call_projects]
    tagged += [ProjectCandidates.from_requirement_query(p) for p in requirement_projects]

    for candidates in tagged:
        existing = merged.get(candidates.project.id)
        if existing is None:
            merged[candidates.project.id] = candidates
        else:
            existing.merge(candidates)
    return merged


@dataclass
class CandidatePool:
    """Merged candidates plus the studios and locations they reference."""

    projects: dict[ObjectId, ProjectCandidates] = field(default_factory=dict)
    studios: dict[ObjectId, Studio] = field(default_factory=dict)
    locations: dict[ObjectId, Location] = field(default_factory=dict)

    @property
    def requirement_count(self) -> int:
        return sum(len(p.requirements) for p in self.projects.values())

    @property
    def casting_call_count(self) -> int:
        return sum(len(p.casting_calls) for p in self.projects.values())


class CandidateCollector:
    """Collects candidate roles for a talent's entitled locations."""

    def __init__(
        self,
        project_repository: Optional[ProjectRepository] = None,
        studio_repository: Optional[StudioRepository] = None,
        location_repository: Optional[LocationRepository] = None,
    ):
        self.projects = project_repository or get_project_repository()
        self.studios = studio_repository or get_studio_repository()
        self.locations = location_repository or get_location_repository()

    async def collect(
        self,
        location_ids: set[ObjectId],
        talent_id: Optional[ObjectId] = None,
    ) -> CandidatePool:
        """
        Collect and merge candidate roles.

        Args:
            location_ids: Locations the talent is entitled to
            talent_id: Talent the candidates are collected for (log context only)

        Raises:
            StoreFailureError: if any store query fails; no partial pool is returned
        """
        try:
            return await self._collect(location_ids)
        except PyMongoError as exc:
            logger.error(f"Candidate collection failed for talent {talent_id}: {exc}")
            raise StoreFailureError("candidate collection") from exc

    async def _collect(self, location_ids: set[ObjectId]) -> CandidatePool:
        casting_call_projects, requirement_projects = await asyncio.gather(
            self.projects.find_with_open_casting_calls_async(location_ids),
            self.projects.find_with_active_requirements_async(),
        )
        merged = merge_candidates(casting_call_projects, requirement_projects)

        studio_ids = {c.project.studio_id for c in merged.values()}
        call_location_ids = {
            call.location_id
            for c in merged.values()
            for call in c.casting_calls
            if call.location_id is not None
        }
        studios, locations = await asyncio.gather(
            self.studios.get_many_async(studio_ids),
            self.locations.get_many_async(call_location_ids),
        )

        pool = CandidatePool(
            projects=merged,
            studios={s.id: s for s in studios},
            locations={loc.id: loc for loc in locations},
        )
        logger.debug(
            f"Collected {len(merged)} projects: {pool.requirement_count} requirements, "
            f"{pool.casting_call_count} casting calls"
        )
        return pool
