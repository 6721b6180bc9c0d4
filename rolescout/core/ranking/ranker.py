"""
Suggested role ranking.

Drops talent requirements below the qualification threshold, orders the
rest by score and builds the response payload.
"""

from dataclasses import dataclass
from typing import Optional, Union

from rolescout.core.collection import CandidatePool, ProjectCandidates
from rolescout.core.matching import ScoreResult
from rolescout.data.models import (
    CastingCall,
    LocationSummary,
    RegionSummary,
    RolePayload,
    SuggestedRole,
    SuggestionResponse,
    TalentRequirement,
)
from rolescout.utils.constants import (
    REQUIREMENT_QUALIFICATION_THRESHOLD,
    SuggestionType,
)

Role = Union[TalentRequirement, CastingCall]


@dataclass(frozen=True)
class ScoredCandidate:
    """A candidate role together with its score."""

    type: SuggestionType
    candidates: ProjectCandidates
    role: Role
    result: ScoreResult

    @property
    def score(self) -> int:
        return self.result.score

    @property
    def sort_key(self) -> tuple[int, str]:
        # Highest score first; equal scores by role id
        return (-self.result.score, str(self.role.id))


class Ranker:
    """Filters, orders and packages scored candidates."""

    def __init__(self, requirement_threshold: int = REQUIREMENT_QUALIFICATION_THRESHOLD):
        self.requirement_threshold = requirement_threshold

    def qualifies(self, candidate: ScoredCandidate) -> bool:
        """
        Casting calls always qualify; being in the talent's region is the
        signal. Talent requirements must reach the threshold.
        """
        if candidate.type == SuggestionType.CASTING_CALL:
            return True
        return candidate.score >= self.requirement_threshold

    def rank(
        self,
        scored: list[ScoredCandidate],
        pool: CandidatePool,
        regions: list[RegionSummary],
        limit: Optional[int] = None,
    ) -> SuggestionResponse:
        """
        Build the ranked response.

        Args:
            scored: Every scored candidate, qualifying or not
            pool: The pool the candidates came from (studios, locations)
            regions: The talent's subscribed regions
            limit: Optional cap on the number of roles returned
        """
        qualified = sorted(
            (c for c in scored if self.qualifies(c)),
            key=lambda c: c.sort_key,
        )
        if limit is not None:
            qualified = qualified[:limit]

        return SuggestionResponse(
            suggested_roles=[self._to_suggested_role(c, pool) for c in qualified],
            subscribed_regions=regions,
        )

    def _to_suggested_role(
        self, candidate: ScoredCandidate, pool: CandidatePool
    ) -> SuggestedRole:
        project = candidate.candidates.project
        studio = pool.studios.get(project.studio_id)

        location: Optional[LocationSummary] = None
        locations: list[LocationSummary] = []
        if candidate.type == SuggestionType.CASTING_CALL:
            role_payload = RolePayload.from_casting_call(candidate.role)
            location = self._location_summary(candidate.role.location_id, pool)
        else:
            role_payload = RolePayload.from_requirement(candidate.role)
            locations = self._project_locations(candidate.candidates, pool)

        return SuggestedRole(
            id=str(candidate.role.id),
            project_id=str(project.id),
            project_title=project.title,
            studio_id=str(project.studio_id),
            studio_name=studio.name if studio else "Unknown Studio",
            role=role_payload,
            match_score=candidate.score,
            match_reasons=list(candidate.result.reasons),
            type=candidate.type,
            location=location,
            locations=locations,
        )

    @staticmethod
    def _location_summary(location_id, pool: CandidatePool) -> Optional[LocationSummary]:
        if location_id is None:
            return None
        location = pool.locations.get(location_id)
        return location.to_summary() if location else None

    def _project_locations(
        self, candidates: ProjectCandidates, pool: CandidatePool
    ) -> list[LocationSummary]:
        """Distinct locations of the project's candidate casting calls."""
        summaries: dict[str, LocationSummary] = {}
        for call in candidates.casting_calls:
            summary = self._location_summary(call.location_id, pool)
            if summary is not None:
                summaries.setdefault(summary.id, summary)
        return list(summaries.values())
