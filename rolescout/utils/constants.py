"""
Application-wide constants for RoleScout.

This module contains all constant values used throughout the application.
Modify these values to customize behavior without changing code logic.
"""

from enum import Enum
from typing import Final


# =============================================================================
# Application Constants
# =============================================================================

APP_NAME: Final[str] = "RoleScout"
APP_DISPLAY_NAME: Final[str] = "RoleScout Role Suggestion Engine"
VERSION: Final[str] = "0.1.0"


# =============================================================================
# Scoring Constants
# =============================================================================

# Points awarded per factor when scoring a talent requirement
SCORING_POINTS: Final[dict[str, int]] = {
    "gender_match": 20,
    "gender_unspecified": 10,
    "age_in_range": 20,
    "age_above_minimum": 15,
    "age_below_maximum": 15,
    "age_unspecified": 10,
    "ethnicity_match": 15,
    "ethnicity_unspecified": 5,
    "height_considered": 10,
}

POINTS_PER_SKILL: Final[int] = 5
MAX_SKILL_BONUS: Final[int] = 25

# Casting calls already passed the region filter, which is worth this much
CASTING_CALL_BASE_SCORE: Final[int] = 40

# Minimum score for a talent requirement to be suggested
REQUIREMENT_QUALIFICATION_THRESHOLD: Final[int] = 30

# Human-readable match reasons
REASON_GENDER_MATCH: Final[str] = "Gender match"
REASON_AGE_MATCH: Final[str] = "Age match"
REASON_ABOVE_MIN_AGE: Final[str] = "Above minimum age"
REASON_BELOW_MAX_AGE: Final[str] = "Below maximum age"
REASON_ETHNICITY_MATCH: Final[str] = "Ethnicity match"
REASON_HEIGHT_CONSIDERED: Final[str] = "Height considered"
REASON_IN_REGION: Final[str] = "In your subscribed region"
REASON_SKILLS_TEMPLATE: Final[str] = "{count} matching skills"

NO_SUBSCRIPTIONS_MESSAGE: Final[str] = (
    "No active region subscriptions found. "
    "Subscribe to a region to see suggested roles."
)


# =============================================================================
# Enums
# =============================================================================


class SubscriptionStatus(str, Enum):
    """Billing status of a region subscription."""

    ACTIVE = "ACTIVE"
    TRIALING = "TRIALING"
    PAST_DUE = "PAST_DUE"
    INCOMPLETE = "INCOMPLETE"
    UNPAID = "UNPAID"
    CANCELED = "CANCELED"

    @property
    def confers_entitlement(self) -> bool:
        """Whether a subscription in this status unlocks its region."""
        return self in ENTITLING_SUBSCRIPTION_STATUSES


ENTITLING_SUBSCRIPTION_STATUSES: Final[frozenset[SubscriptionStatus]] = frozenset(
    {SubscriptionStatus.ACTIVE, SubscriptionStatus.TRIALING}
)


class ProjectStatus(str, Enum):
    """Lifecycle status of a studio project."""

    PLANNING = "PLANNING"
    CASTING = "CASTING"
    IN_PRODUCTION = "IN_PRODUCTION"
    POST_PRODUCTION = "POST_PRODUCTION"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# Projects in these statuses never contribute candidates
CLOSED_PROJECT_STATUSES: Final[tuple[ProjectStatus, ...]] = (
    ProjectStatus.COMPLETED,
    ProjectStatus.CANCELLED,
)


class CastingCallStatus(str, Enum):
    """Status of a casting call."""

    DRAFT = "DRAFT"
    OPEN = "OPEN"
    CLOSED = "CLOSED"


class SuggestionType(str, Enum):
    """Discriminator for the two kinds of suggested role."""

    REQUIREMENT = "requirement"
    CASTING_CALL = "castingCall"


class AuditAction(str, Enum):
    """Types of actions that can be audited."""

    ROLES_SUGGESTED = "roles_suggested"
    SUGGESTIONS_SKIPPED = "suggestions_skipped"
