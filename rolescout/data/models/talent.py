"""
Talent profile data models for RoleScout.

The profile is owned by the performer and is read-only to the
suggestion engine; only the attributes used for matching are modelled.
"""

from datetime import date
from typing import Any, Optional

from pydantic import Field, field_validator

from .base import BaseDocument, PyObjectId, date_only


class TalentProfile(BaseDocument):
    """A performer's profile as stored in the `talent_profiles` collection."""

    user_id: PyObjectId
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    # Demographics
    gender: Optional[str] = None
    ethnicity: Optional[str] = None
    height: Optional[str] = None  # free text, e.g. "5'9\"" or "175cm"
    date_of_birth: Optional[date] = None

    skills: list[str] = Field(default_factory=list)

    @field_validator("gender", "ethnicity", "height", mode="before")
    @classmethod
    def blank_to_none(cls, v: Optional[str]) -> Optional[str]:
        """Profile forms submit empty strings for unset fields."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("date_of_birth", mode="before")
    @classmethod
    def stored_date(cls, v: Any) -> Any:
        """PyMongo returns the stored birth date as a datetime."""
        return date_only(v)

    @field_validator("skills", mode="before")
    @classmethod
    def missing_skills(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("skills")
    @classmethod
    def clean_skills(cls, v: list[str]) -> list[str]:
        """Drop blank entries and duplicates, keeping first-seen order."""
        seen: dict[str, str] = {}
        for skill in v:
            name = skill.strip()
            if name and name.lower() not in seen:
                seen[name.lower()] = name
        return list(seen.values())

    @property
    def full_name(self) -> str:
        parts = [p for p in [self.first_name, self.last_name] if p]
        return " ".join(parts) if parts else "Unknown Talent"
