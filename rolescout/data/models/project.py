"""
Project catalog data models for RoleScout.

Projects are studio-owned containers. Talent requirements and casting
calls are embedded in the project document, one array each.
"""

from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator, model_validator

from rolescout.utils.constants import (
    CLOSED_PROJECT_STATUSES,
    CastingCallStatus,
    ProjectStatus,
)

from .base import BaseDocument, EmbeddedEntity, PyObjectId, date_only, derived_object_id


class Studio(BaseDocument):
    """A production studio."""

    name: str
    description: Optional[str] = None
    website: Optional[str] = None


class Skill(EmbeddedEntity):
    """A structured skill row attached to a casting call."""

    name: str

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class TalentRequirement(EmbeddedEntity):
    """
    A role specification attached to a project.

    Requirements carry no location. Skills are free text, comma separated.
    Age bounds are taken as stored: an unreadable bound is treated as
    unset and an inverted range simply matches no age.
    """

    title: str
    description: Optional[str] = None
    is_active: bool = True

    gender: Optional[str] = None
    min_age: Optional[int] = None
    max_age: Optional[int] = None
    ethnicity: Optional[str] = None
    height: Optional[str] = None
    skills: Optional[str] = None
    other_requirements: Optional[str] = None
    survey: Optional[dict[str, Any]] = None

    @field_validator("gender", "ethnicity", "height", "skills", "other_requirements", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("min_age", "max_age", mode="before")
    @classmethod
    def coerce_age(cls, v: Any) -> Optional[int]:
        """Studio forms submit ages as strings; anything unreadable counts as unset."""
        if isinstance(v, bool):
            return None
        if isinstance(v, str):
            v = v.strip()
            if not v.isdigit():
                return None
            v = int(v)
        if isinstance(v, float) and v.is_integer():
            v = int(v)
        if not isinstance(v, int) or v < 0:
            return None
        return v

    @property
    def age_range_display(self) -> Optional[str]:
        if self.min_age is not None and self.max_age is not None:
            return f"{self.min_age}-{self.max_age}"
        if self.min_age is not None:
            return f"{self.min_age}+"
        if self.max_age is not None:
            return f"Up to {self.max_age}"
        return None


class CastingCall(EmbeddedEntity):
    """An open call for a role, optionally tied to a location."""

    title: str
    description: Optional[str] = None
    requirements: Optional[str] = None
    compensation: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: CastingCallStatus = CastingCallStatus.DRAFT
    location_id: Optional[PyObjectId] = None
    skills: list[Skill] = Field(default_factory=list)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def stored_date(cls, v: Any) -> Any:
        return date_only(v)

    @property
    def is_open(self) -> bool:
        return self.status == CastingCallStatus.OPEN


class Project(BaseDocument):
    """A studio production with its embedded roles."""

    studio_id: PyObjectId
    title: str
    description: Optional[str] = None
    status: ProjectStatus = ProjectStatus.PLANNING
    is_archived: bool = False
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    talent_requirements: list[TalentRequirement] = Field(default_factory=list)
    casting_calls: list[CastingCall] = Field(default_factory=list)

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def stored_date(cls, v: Any) -> Any:
        return date_only(v)

    @model_validator(mode="before")
    @classmethod
    def identify_embedded_rows(cls, data: Any) -> Any:
        """
        Give embedded rows stored without `_id` an id derived from the
        project id and their array position, so reloads agree.
        """
        if not isinstance(data, dict):
            return data
        project_id = data.get("_id", data.get("id"))
        if project_id is None:
            return data

        data = dict(data)
        for field in ("talent_requirements", "casting_calls"):
            rows = data.get(field)
            if not isinstance(rows, list):
                continue
            data[field] = [
                {**row, "_id": derived_object_id(project_id, field, index)}
                if isinstance(row, dict) and row.get("_id", row.get("id")) is None
                else row
                for index, row in enumerate(rows)
            ]
        return data

    @property
    def accepts_candidates(self) -> bool:
        """Archived or finished projects contribute no candidates."""
        return not self.is_archived and self.status not in CLOSED_PROJECT_STATUSES

    @property
    def active_requirements(self) -> list[TalentRequirement]:
        return [r for r in self.talent_requirements if r.is_active]

    def open_casting_calls_in(self, location_ids: set) -> list[CastingCall]:
        """Open casting calls whose location is one of `location_ids`."""
        return [
            c for c in self.casting_calls
            if c.is_open and c.location_id is not None and c.location_id in location_ids
        ]
