"""
Tests for rolescout.core.matching.skills: skill adapters and matching.
"""

from rolescout.core.matching.skills import (
    count_matching_skills,
    normalize_skills,
    skill_bonus,
    skills_from_rows,
    skills_from_text,
)
from rolescout.data.models import Skill


# ── normalize_skills ─────────────────────────────────────────────────────────


class TestNormalizeSkills:
    def test_lowercases_and_strips(self):
        assert normalize_skills(["  Dance ", "SINGING"]) == ("dance", "singing")

    def test_drops_blanks(self):
        assert normalize_skills(["", "   ", "acting"]) == ("acting",)

    def test_deduplicates_keeping_first_order(self):
        assert normalize_skills(["Tap", "ballet", "tap"]) == ("tap", "ballet")


# ── adapters ────────────────────────────────────────────────────────────────


class TestSkillsFromText:
    def test_comma_separated(self):
        assert skills_from_text("dance,singing, Stage Combat") == ("dance", "singing", "stage combat")

    def test_empty_and_none(self):
        assert skills_from_text(None) == ()
        assert skills_from_text("") == ()

    def test_trailing_commas_ignored(self):
        assert skills_from_text("dance,,") == ("dance",)


class TestSkillsFromRows:
    def test_structured_rows(self):
        rows = [Skill(name="Horse Riding"), Skill(name="Fencing")]
        assert skills_from_rows(rows) == ("horse riding", "fencing")

    def test_no_rows(self):
        assert skills_from_rows([]) == ()

    def test_both_forms_normalize_identically(self):
        rows = [Skill(name="Dance"), Skill(name="Singing")]
        assert skills_from_rows(rows) == skills_from_text("dance, singing")


# ── count_matching_skills ───────────────────────────────────────────────────


class TestCountMatchingSkills:
    def test_exact_match(self):
        assert count_matching_skills(("dance",), ("dance", "singing")) == 1

    def test_role_skill_contains_talent_skill(self):
        assert count_matching_skills(("dance",), ("ballet dance",)) == 1

    def test_talent_skill_contains_role_skill(self):
        assert count_matching_skills(("contemporary dance",), ("dance",)) == 1

    def test_counts_role_skills_not_pairs(self):
        # Two talent skills covering the same role skill still count once
        assert count_matching_skills(("dance", "tap dance"), ("dance",)) == 1

    def test_no_overlap(self):
        assert count_matching_skills(("juggling",), ("dance", "singing")) == 0

    def test_empty_inputs(self):
        assert count_matching_skills((), ("dance",)) == 0
        assert count_matching_skills(("dance",), ()) == 0


# ── skill_bonus ─────────────────────────────────────────────────────────────


class TestSkillBonus:
    def test_five_points_per_skill(self):
        assert skill_bonus(3, 5, 25) == 15

    def test_capped(self):
        assert skill_bonus(6, 5, 25) == 25

    def test_zero(self):
        assert skill_bonus(0, 5, 25) == 0
