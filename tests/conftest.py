"""
Shared test fixtures for the RoleScout test suite.

Sets environment variables before any rolescout imports to prevent config
failures, then provides model factories and an in-memory catalog whose
fake repositories answer the same async queries as the MongoDB ones.
"""

import os

# === Set environment BEFORE any rolescout imports ===
os.environ.setdefault("APP_ENVIRONMENT", "testing")
os.environ.setdefault("DB_NAME", "rolescout_test")
os.environ.setdefault("LOG_FILE_OUTPUT", "false")

from datetime import date, datetime, timezone
from typing import Any, Iterable, Optional

import pytest
from bson import ObjectId
from pymongo.errors import OperationFailure

from rolescout.core.collection import CandidateCollector
from rolescout.core.entitlement import EntitlementResolver
from rolescout.core.matching import RoleScorer, TalentAttributes
from rolescout.core.ranking import Ranker
from rolescout.core.suggestions import RoleSuggestionService
from rolescout.data.models import (
    CastingCall,
    Location,
    Project,
    Region,
    RegionPlan,
    RegionSubscription,
    Skill,
    Studio,
    TalentProfile,
    TalentRequirement,
)
from rolescout.utils.config import MatchingSettings
from rolescout.utils.constants import (
    ENTITLING_SUBSCRIPTION_STATUSES,
    CastingCallStatus,
    ProjectStatus,
    SubscriptionStatus,
)


# Fixed evaluation instant used across the suite
AS_OF = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

# Born so that the talent is 25 on AS_OF
DOB_AGE_25 = date(1999, 1, 10)


# ---------------------------------------------------------------------------
# Factory fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def as_of() -> datetime:
    return AS_OF


@pytest.fixture
def make_talent():
    """Factory that returns a callable to build TalentProfile documents."""

    def _factory(
        gender: Optional[str] = "Female",
        ethnicity: Optional[str] = "Asian",
        height: Optional[str] = None,
        date_of_birth: Optional[date] = DOB_AGE_25,
        skills: Optional[list[str]] = None,
        **kwargs,
    ) -> TalentProfile:
        return TalentProfile(
            id=kwargs.pop("id", ObjectId()),
            user_id=kwargs.pop("user_id", ObjectId()),
            first_name="Jane",
            last_name="Doe",
            gender=gender,
            ethnicity=ethnicity,
            height=height,
            date_of_birth=date_of_birth,
            skills=skills if skills is not None else ["dance"],
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_attributes():
    """Factory for TalentAttributes, the scoring view of a talent."""

    def _factory(
        gender: Optional[str] = None,
        ethnicity: Optional[str] = None,
        height: Optional[str] = None,
        age: Optional[int] = None,
        skills: Iterable[str] = (),
    ) -> TalentAttributes:
        return TalentAttributes(
            gender=gender,
            ethnicity=ethnicity,
            height=height,
            age=age,
            skills=tuple(s.lower() for s in skills),
        )

    return _factory


@pytest.fixture
def make_requirement():
    """Factory for TalentRequirement subdocuments."""

    def _factory(title: str = "Lead Dancer", **kwargs) -> TalentRequirement:
        return TalentRequirement(title=title, **kwargs)

    return _factory


@pytest.fixture
def make_casting_call():
    """Factory for CastingCall subdocuments."""

    def _factory(
        title: str = "Open Call",
        location_id: Optional[ObjectId] = None,
        skills: Iterable[str] = (),
        status: CastingCallStatus = CastingCallStatus.OPEN,
        **kwargs,
    ) -> CastingCall:
        return CastingCall(
            title=title,
            location_id=location_id,
            status=status,
            skills=[Skill(name=s) for s in skills],
            **kwargs,
        )

    return _factory


@pytest.fixture
def make_project():
    """Factory for Project documents."""

    def _factory(
        studio_id: ObjectId,
        title: str = "Summer Musical",
        talent_requirements: Optional[list[TalentRequirement]] = None,
        casting_calls: Optional[list[CastingCall]] = None,
        status: ProjectStatus = ProjectStatus.CASTING,
        is_archived: bool = False,
        **kwargs,
    ) -> Project:
        return Project(
            id=kwargs.pop("id", ObjectId()),
            studio_id=studio_id,
            title=title,
            talent_requirements=talent_requirements or [],
            casting_calls=casting_calls or [],
            status=status,
            is_archived=is_archived,
            **kwargs,
        )

    return _factory


# ---------------------------------------------------------------------------
# In-memory Motor collection
# ---------------------------------------------------------------------------


class FakeCursor:
    def __init__(self, documents):
        self.documents = documents
        self.sort_args = None

    def sort(self, key, direction):
        self.sort_args = (key, direction)
        return self

    async def to_list(self, length=None):
        return list(self.documents)


class FakeCollection:
    """Answers every `find` with all stored documents, recording the query."""

    def __init__(self, documents=()):
        self.documents = list(documents)
        self.queries = []
        self.cursor = None

    def find(self, query):
        self.queries.append(query)
        self.cursor = FakeCursor(self.documents)
        return self.cursor

    async def find_one(self, query):
        self.queries.append(query)
        return self.documents[0] if self.documents else None


@pytest.fixture
def bind_collection():
    """Factory that points a real repository at a FakeCollection of raw documents."""

    def _bind(repository, documents=()):
        collection = FakeCollection(documents)
        repository._get_async_collection = lambda: collection
        return repository, collection

    return _bind


# ---------------------------------------------------------------------------
# In-memory repositories
# ---------------------------------------------------------------------------


class FakeRepository:
    """Dictionary-backed stand-in for a BaseRepository subclass."""

    def __init__(self, items: Iterable[Any] = ()):
        self.items: dict[ObjectId, Any] = {item.id: item for item in items}
        self.fail_with: Optional[Exception] = None
        self.calls: list[str] = []

    def add(self, item: Any) -> Any:
        self.items[item.id] = item
        return item

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if self.fail_with is not None:
            raise self.fail_with

    def _sorted(self, items: Iterable[Any]) -> list[Any]:
        return sorted(items, key=lambda i: i.id)

    async def get_by_id_async(self, id_value):
        self._record("get_by_id_async")
        return self.items.get(ObjectId(str(id_value)))

    async def get_many_async(self, ids):
        self._record("get_many_async")
        wanted = {ObjectId(str(i)) for i in ids}
        return self._sorted(i for key, i in self.items.items() if key in wanted)


class FakeSubscriptionRepository(FakeRepository):
    async def get_entitling_by_user_async(self, user_id):
        self._record("get_entitling_by_user_async")
        statuses = {s.value for s in ENTITLING_SUBSCRIPTION_STATUSES}
        return self._sorted(
            s for s in self.items.values()
            if s.user_id == user_id and s.status in statuses
        )


class FakeLocationRepository(FakeRepository):
    async def get_by_regions_async(self, region_ids):
        self._record("get_by_regions_async")
        wanted = set(region_ids)
        return self._sorted(loc for loc in self.items.values() if loc.region_id in wanted)


class FakeProjectRepository(FakeRepository):
    async def find_with_open_casting_calls_async(self, location_ids):
        self._record("find_with_open_casting_calls_async")
        allowed = set(location_ids)
        return [
            p.model_copy(
                update={"casting_calls": p.open_casting_calls_in(allowed), "talent_requirements": []}
            )
            for p in self._sorted(self.items.values())
            if p.accepts_candidates and p.open_casting_calls_in(allowed)
        ]

    async def find_with_active_requirements_async(self):
        self._record("find_with_active_requirements_async")
        return [
            p.model_copy(
                update={"talent_requirements": p.active_requirements, "casting_calls": []}
            )
            for p in self._sorted(self.items.values())
            if p.accepts_candidates and p.active_requirements
        ]


class FakeCatalog:
    """
    A small marketplace:

    - regions London (Soho, Camden) and Manchester (Salford)
    - one plan per region, one studio
    """

    def __init__(self):
        self.talents = FakeRepository()
        self.subscriptions = FakeSubscriptionRepository()
        self.plans = FakeRepository()
        self.regions = FakeRepository()
        self.locations = FakeLocationRepository()
        self.studios = FakeRepository()
        self.projects = FakeProjectRepository()

        self.london = self.regions.add(Region(id=ObjectId(), name="London"))
        self.manchester = self.regions.add(Region(id=ObjectId(), name="Manchester"))
        self.soho = self.locations.add(Location(id=ObjectId(), name="Soho", region_id=self.london.id))
        self.camden = self.locations.add(Location(id=ObjectId(), name="Camden", region_id=self.london.id))
        self.salford = self.locations.add(
            Location(id=ObjectId(), name="Salford", region_id=self.manchester.id)
        )
        self.london_plan = self.plans.add(
            RegionPlan(id=ObjectId(), region_id=self.london.id, name="London Monthly")
        )
        self.manchester_plan = self.plans.add(
            RegionPlan(id=ObjectId(), region_id=self.manchester.id, name="Manchester Monthly")
        )
        self.studio = self.studios.add(Studio(id=ObjectId(), name="Northlight Pictures"))

    @property
    def repositories(self) -> list[FakeRepository]:
        return [
            self.talents, self.subscriptions, self.plans, self.regions,
            self.locations, self.studios, self.projects,
        ]

    def subscribe(
        self,
        talent: TalentProfile,
        plan: RegionPlan,
        status: SubscriptionStatus = SubscriptionStatus.ACTIVE,
        current_period_end: Optional[datetime] = None,
    ) -> RegionSubscription:
        return self.subscriptions.add(
            RegionSubscription(
                id=ObjectId(),
                user_id=talent.user_id,
                region_plan_id=plan.id,
                status=status,
                current_period_end=current_period_end,
            )
        )

    def fail(self, error: Optional[Exception] = None) -> None:
        """Make every repository raise on its next call."""
        for repo in self.repositories:
            repo.fail_with = error or OperationFailure("simulated store failure")


@pytest.fixture
def catalog() -> FakeCatalog:
    return FakeCatalog()


@pytest.fixture
def matching_settings() -> MatchingSettings:
    return MatchingSettings()


@pytest.fixture
def scorer(matching_settings) -> RoleScorer:
    return RoleScorer(matching_settings)


@pytest.fixture
def ranker(matching_settings) -> Ranker:
    return Ranker(matching_settings.requirement_threshold)


@pytest.fixture
def resolver(catalog) -> EntitlementResolver:
    return EntitlementResolver(
        subscription_repository=catalog.subscriptions,
        plan_repository=catalog.plans,
        region_repository=catalog.regions,
        location_repository=catalog.locations,
    )


@pytest.fixture
def collector(catalog) -> CandidateCollector:
    return CandidateCollector(
        project_repository=catalog.projects,
        studio_repository=catalog.studios,
        location_repository=catalog.locations,
    )


@pytest.fixture
def service(catalog, resolver, collector, scorer, ranker, matching_settings) -> RoleSuggestionService:
    """RoleSuggestionService wired to the in-memory catalog."""
    return RoleSuggestionService(
        talent_repository=catalog.talents,
        entitlement_resolver=resolver,
        candidate_collector=collector,
        scorer=scorer,
        ranker=ranker,
        settings=matching_settings,
    )
