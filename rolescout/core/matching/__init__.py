"""Talent-role scoring module."""

from .scoring import (
    RoleScorer,
    ScoreResult,
    TalentAttributes,
    calculate_age,
    get_role_scorer,
)
from .skills import (
    count_matching_skills,
    normalize_skills,
    skill_bonus,
    skills_from_rows,
    skills_from_text,
)

__all__ = [
    "RoleScorer",
    "ScoreResult",
    "TalentAttributes",
    "calculate_age",
    "get_role_scorer",
    "count_matching_skills",
    "normalize_skills",
    "skill_bonus",
    "skills_from_rows",
    "skills_from_text",
]
