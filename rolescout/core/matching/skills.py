"""
Skill normalization and matching.

Talent requirements store skills as comma-separated free text while
casting calls store structured skill rows. Both are converted to the
same normalized form before the one shared matching routine runs.
"""

from typing import Iterable

from rolescout.data.models.project import Skill


def normalize_skills(names: Iterable[str]) -> tuple[str, ...]:
    """Lowercase, strip and de-duplicate skill names, keeping first-seen order."""
    seen: dict[str, None] = {}
    for name in names:
        cleaned = name.strip().lower()
        if cleaned:
            seen.setdefault(cleaned, None)
    return tuple(seen)


def skills_from_text(text: str | None) -> tuple[str, ...]:
    """Adapter for the free-text form, e.g. "dance, singing,Stage Combat"."""
    if not text:
        return ()
    return normalize_skills(text.split(","))


def skills_from_rows(rows: Iterable[Skill]) -> tuple[str, ...]:
    """Adapter for structured skill rows."""
    return normalize_skills(row.name for row in rows)


def count_matching_skills(
    talent_skills: Iterable[str],
    role_skills: Iterable[str],
) -> int:
    """
    Count role skills that the talent covers.

    A role skill is covered when it and one of the talent's skills
    contain one another ("dance" covers "ballet dance" and vice versa).
    Both inputs must already be normalized.
    """
    talent = tuple(talent_skills)
    return sum(
        1 for wanted in role_skills
        if any(wanted in have or have in wanted for have in talent)
    )


def skill_bonus(matched: int, points_per_skill: int, max_bonus: int) -> int:
    """Points for `matched` skills, capped at `max_bonus`."""
    return min(max_bonus, points_per_skill * matched)
