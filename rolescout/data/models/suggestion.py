"""
Suggested role response models for RoleScout.

These are derived per request and never persisted. They serialize to
the camelCase shape the talent dashboard consumes.
"""

from typing import Any, Optional

from pydantic import Field

from rolescout.utils.constants import SuggestionType

from .base import ResponseModel
from .project import CastingCall, TalentRequirement
from .region import LocationSummary, RegionSummary


class RolePayload(ResponseModel):
    """Display fields of the suggested role, common to both role kinds."""

    id: str
    title: str
    description: Optional[str] = None
    gender: Optional[str] = None
    age_range: Optional[str] = None
    ethnicity: Optional[str] = None
    height: Optional[str] = None
    skills: Optional[str] = None
    requirements: Optional[str] = None
    compensation: Optional[str] = None
    survey: Optional[dict[str, Any]] = None

    @classmethod
    def from_requirement(cls, requirement: TalentRequirement) -> "RolePayload":
        return cls(
            id=str(requirement.id),
            title=requirement.title,
            description=requirement.description,
            gender=requirement.gender,
            age_range=requirement.age_range_display,
            ethnicity=requirement.ethnicity,
            height=requirement.height,
            skills=requirement.skills,
            requirements=requirement.other_requirements,
            survey=requirement.survey,
        )

    @classmethod
    def from_casting_call(cls, casting_call: CastingCall) -> "RolePayload":
        skills = ", ".join(s.name for s in casting_call.skills) or None
        return cls(
            id=str(casting_call.id),
            title=casting_call.title,
            description=casting_call.description,
            skills=skills,
            requirements=casting_call.requirements,
            compensation=casting_call.compensation,
        )


class SuggestedRole(ResponseModel):
    """One ranked suggestion."""

    id: str
    project_id: str
    project_title: str
    studio_id: str
    studio_name: str
    role: RolePayload
    match_score: int = Field(ge=0)
    match_reasons: list[str] = Field(default_factory=list)
    type: SuggestionType

    # Casting calls carry their single location; requirements list the
    # locations of their project's casting calls.
    location: Optional[LocationSummary] = None
    locations: list[LocationSummary] = Field(default_factory=list)


class SuggestionResponse(ResponseModel):
    """Outbound payload of one suggestion run."""

    suggested_roles: list[SuggestedRole] = Field(default_factory=list)
    subscribed_regions: list[RegionSummary] = Field(default_factory=list)
    message: Optional[str] = None

    @property
    def has_subscriptions(self) -> bool:
        return bool(self.subscribed_regions)
