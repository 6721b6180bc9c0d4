"""
Role suggestion service.

Library entry point that turns a talent profile id into a ranked list of
roles the talent may see and is likely to fit:

    entitlement -> candidate collection -> scoring -> ranking
"""

import asyncio
from datetime import datetime, timezone
from typing import Optional

from bson import ObjectId
from pymongo.errors import PyMongoError

from rolescout.core.collection import CandidateCollector, CandidatePool
from rolescout.core.entitlement import EntitlementResolver
from rolescout.core.exceptions import ProfileNotFoundError, StoreFailureError
from rolescout.core.matching import RoleScorer, TalentAttributes, get_role_scorer
from rolescout.core.ranking import Ranker, ScoredCandidate
from rolescout.data.models import SuggestionResponse, TalentProfile
from rolescout.data.models.base import as_utc
from rolescout.data.repositories import TalentProfileRepository, get_talent_repository
from rolescout.utils.config import MatchingSettings, get_settings
from rolescout.utils.constants import (
    NO_SUBSCRIPTIONS_MESSAGE,
    AuditAction,
    SuggestionType,
)
from rolescout.utils.logger import LoggerMixin, audit_log


def score_pool(
    scorer: RoleScorer,
    talent: TalentAttributes,
    pool: CandidatePool,
) -> list[ScoredCandidate]:
    """Score every candidate role in the pool, in collection order."""
    scored: list[ScoredCandidate] = []
    for candidates in pool.projects.values():
        for requirement in candidates.requirements:
            scored.append(
                ScoredCandidate(
                    type=SuggestionType.REQUIREMENT,
                    candidates=candidates,
                    role=requirement,
                    result=scorer.score_requirement(talent, requirement),
                )
            )
        for casting_call in candidates.casting_calls:
            scored.append(
                ScoredCandidate(
                    type=SuggestionType.CASTING_CALL,
                    candidates=candidates,
                    role=casting_call,
                    result=scorer.score_casting_call(talent, casting_call),
                )
            )
    return scored


class RoleSuggestionService(LoggerMixin):
    """
    Suggests open roles to a talent.

    All collaborators can be injected; by default the MongoDB-backed
    repositories and the configured matching settings are used.
    """

    def __init__(
        self,
        talent_repository: Optional[TalentProfileRepository] = None,
        entitlement_resolver: Optional[EntitlementResolver] = None,
        candidate_collector: Optional[CandidateCollector] = None,
        scorer: Optional[RoleScorer] = None,
        ranker: Optional[Ranker] = None,
        settings: Optional[MatchingSettings] = None,
    ):
        self.settings = settings or get_settings().matching
        self.talents = talent_repository or get_talent_repository()
        self.entitlements = entitlement_resolver or EntitlementResolver()
        self.collector = candidate_collector or CandidateCollector()
        self.scorer = scorer or get_role_scorer()
        self.ranker = ranker or Ranker(self.settings.requirement_threshold)

    async def suggest_roles(
        self,
        talent_id: str | ObjectId,
        as_of: Optional[datetime] = None,
        timeout: Optional[float] = None,
        limit: Optional[int] = None,
    ) -> SuggestionResponse:
        """
        Suggest roles for a talent.

        Args:
            talent_id: Talent profile identifier
            as_of: Evaluation instant for ages and subscription periods (default: now, UTC)
            timeout: Deadline in seconds for the store queries (default: configured value)
            limit: Maximum number of roles to return (default: configured value)

        Returns:
            SuggestionResponse; when the talent has no region subscription the
            role list is empty and `message` explains why.

        Raises:
            ProfileNotFoundError: no profile exists for `talent_id`
            StoreFailureError: a store query failed
            asyncio.TimeoutError: the deadline passed before the store answered
        """
        as_of = as_utc(as_of) if as_of else datetime.now(timezone.utc)
        timeout = timeout if timeout is not None else self.settings.query_timeout_seconds
        limit = limit if limit is not None else self.settings.max_results

        talent = await self._load_talent(talent_id, timeout)

        entitlement, pool = await self._gather(talent, as_of, timeout)
        if entitlement.is_empty:
            self.logger.info(f"Talent {talent.id} has no active region subscriptions")
            audit_log(AuditAction.SUGGESTIONS_SKIPPED, talent.id, {"reason": "no_subscriptions"})
            return SuggestionResponse(message=NO_SUBSCRIPTIONS_MESSAGE)

        attributes = TalentAttributes.from_profile(talent, as_of.date())
        scored = score_pool(self.scorer, attributes, pool)
        response = self.ranker.rank(scored, pool, entitlement.regions, limit=limit)

        self.logger.info(
            f"Suggested {len(response.suggested_roles)} of {len(scored)} candidate roles "
            f"to talent {talent.id} across {len(entitlement.regions)} regions"
        )
        audit_log(
            AuditAction.ROLES_SUGGESTED,
            talent.id,
            {
                "as_of": as_of.isoformat(),
                "roles": [
                    {"id": r.id, "type": r.type, "score": r.match_score}
                    for r in response.suggested_roles
                ],
            },
        )
        return response

    async def _load_talent(
        self, talent_id: str | ObjectId, timeout: Optional[float]
    ) -> TalentProfile:
        if not ObjectId.is_valid(talent_id):
            raise ProfileNotFoundError(talent_id)
        try:
            talent = await asyncio.wait_for(self.talents.get_by_id_async(talent_id), timeout)
        except PyMongoError as exc:
            self.logger.error(f"Profile lookup failed for talent {talent_id}: {exc}")
            raise StoreFailureError("profile lookup") from exc
        if talent is None:
            raise ProfileNotFoundError(talent_id)
        return talent

    async def _gather(self, talent: TalentProfile, as_of: datetime, timeout: Optional[float]):
        """Resolve entitlement, then collect candidates, under one deadline."""

        async def run():
            entitlement = await self.entitlements.resolve(talent, as_of)
            if entitlement.is_empty:
                return entitlement, CandidatePool()
            pool = await self.collector.collect(entitlement.location_ids, talent_id=talent.id)
            return entitlement, pool

        return await asyncio.wait_for(run(), timeout)
