"""
Talent-role scoring.

Scores a talent against a single role (talent requirement or casting
call) and explains the score with a list of match reasons. Scoring is
pure: the evaluation date is passed in, nothing here reads a clock or
touches the store.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional

from rolescout.data.models.project import CastingCall, TalentRequirement
from rolescout.data.models.talent import TalentProfile
from rolescout.utils.config import MatchingSettings, get_settings
from rolescout.utils.constants import (
    REASON_ABOVE_MIN_AGE,
    REASON_AGE_MATCH,
    REASON_BELOW_MAX_AGE,
    REASON_ETHNICITY_MATCH,
    REASON_GENDER_MATCH,
    REASON_HEIGHT_CONSIDERED,
    REASON_IN_REGION,
    REASON_SKILLS_TEMPLATE,
    SCORING_POINTS,
)

from .skills import (
    count_matching_skills,
    normalize_skills,
    skill_bonus,
    skills_from_rows,
    skills_from_text,
)


def calculate_age(date_of_birth: date, as_of: date) -> int:
    """Whole years between `date_of_birth` and `as_of`."""
    age = as_of.year - date_of_birth.year
    if (as_of.month, as_of.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age


def _same_text(a: str, b: str) -> bool:
    return a.strip().lower() == b.strip().lower()


@dataclass(frozen=True)
class TalentAttributes:
    """The parts of a talent profile that scoring looks at."""

    gender: Optional[str] = None
    ethnicity: Optional[str] = None
    height: Optional[str] = None
    age: Optional[int] = None
    skills: tuple[str, ...] = ()

    @classmethod
    def from_profile(cls, profile: TalentProfile, as_of: date) -> "TalentAttributes":
        age = calculate_age(profile.date_of_birth, as_of) if profile.date_of_birth else None
        return cls(
            gender=profile.gender,
            ethnicity=profile.ethnicity,
            height=profile.height,
            age=age,
            skills=normalize_skills(profile.skills),
        )


@dataclass(frozen=True)
class ScoreResult:
    """Score of one talent-role pair with the reasons behind it."""

    score: int = 0
    reasons: tuple[str, ...] = field(default_factory=tuple)


class RoleScorer:
    """
    Multi-factor scorer for suggested roles.

    Talent requirements are scored on gender, age, ethnicity, height and
    skills. Casting calls start from a base score for being in one of the
    talent's regions and add the same skills bonus.
    """

    def __init__(self, settings: Optional[MatchingSettings] = None):
        """
        Initialize the scorer.

        Args:
            settings: Optional matching settings (skill points, casting call base score)
        """
        self.settings = settings or MatchingSettings()
        self.points = SCORING_POINTS

    # -------------------------------------------------------------------------
    # Talent requirements
    # -------------------------------------------------------------------------

    def score_requirement(
        self,
        talent: TalentAttributes,
        requirement: TalentRequirement,
    ) -> ScoreResult:
        """Score a talent against a talent requirement."""
        score = 0
        reasons: list[str] = []

        for points, reason in (
            self._score_gender(talent, requirement),
            self._score_age(talent, requirement),
            self._score_ethnicity(talent, requirement),
            self._score_height(talent, requirement),
            self._score_skills(talent.skills, skills_from_text(requirement.skills)),
        ):
            score += points
            if reason:
                reasons.append(reason)

        return ScoreResult(score=score, reasons=tuple(reasons))

    def _score_gender(
        self, talent: TalentAttributes, requirement: TalentRequirement
    ) -> tuple[int, Optional[str]]:
        if not requirement.gender or not talent.gender:
            return self.points["gender_unspecified"], None
        if _same_text(requirement.gender, talent.gender):
            return self.points["gender_match"], REASON_GENDER_MATCH
        return 0, None

    def _score_age(
        self, talent: TalentAttributes, requirement: TalentRequirement
    ) -> tuple[int, Optional[str]]:
        age = talent.age
        min_age, max_age = requirement.min_age, requirement.max_age

        if age is None or (min_age is None and max_age is None):
            return self.points["age_unspecified"], None

        if min_age is not None and max_age is not None:
            if min_age <= age <= max_age:
                return self.points["age_in_range"], REASON_AGE_MATCH
        elif min_age is not None:
            if age >= min_age:
                return self.points["age_above_minimum"], REASON_ABOVE_MIN_AGE
        elif age <= max_age:
            return self.points["age_below_maximum"], REASON_BELOW_MAX_AGE

        # Outside the requested range
        return 0, None

    def _score_ethnicity(
        self, talent: TalentAttributes, requirement: TalentRequirement
    ) -> tuple[int, Optional[str]]:
        if not requirement.ethnicity or not talent.ethnicity:
            return self.points["ethnicity_unspecified"], None

        wanted = requirement.ethnicity.strip().lower()
        have = talent.ethnicity.strip().lower()
        if wanted == have or wanted in have or have in wanted:
            return self.points["ethnicity_match"], REASON_ETHNICITY_MATCH
        return 0, None

    def _score_height(
        self, talent: TalentAttributes, requirement: TalentRequirement
    ) -> tuple[int, Optional[str]]:
        # Presence only; heights are free text on both sides
        if requirement.height and talent.height:
            return self.points["height_considered"], REASON_HEIGHT_CONSIDERED
        return 0, None

    # -------------------------------------------------------------------------
    # Casting calls
    # -------------------------------------------------------------------------

    def score_casting_call(
        self,
        talent: TalentAttributes,
        casting_call: CastingCall,
    ) -> ScoreResult:
        """Score a talent against an in-region casting call."""
        score = self.settings.casting_call_base_score
        reasons = [REASON_IN_REGION]

        points, reason = self._score_skills(talent.skills, skills_from_rows(casting_call.skills))
        score += points
        if reason:
            reasons.append(reason)

        return ScoreResult(score=score, reasons=tuple(reasons))

    # -------------------------------------------------------------------------
    # Shared
    # -------------------------------------------------------------------------

    def _score_skills(
        self, talent_skills: tuple[str, ...], role_skills: tuple[str, ...]
    ) -> tuple[int, Optional[str]]:
        matched = count_matching_skills(talent_skills, role_skills)
        if matched == 0:
            return 0, None
        bonus = skill_bonus(
            matched,
            self.settings.points_per_skill,
            self.settings.max_skill_bonus,
        )
        return bonus, REASON_SKILLS_TEMPLATE.format(count=matched)


# Singleton instance
_role_scorer: Optional[RoleScorer] = None


def get_role_scorer() -> RoleScorer:
    """Get the role scorer singleton instance."""
    global _role_scorer
    if _role_scorer is None:
        _role_scorer = RoleScorer(get_settings().matching)
    return _role_scorer
