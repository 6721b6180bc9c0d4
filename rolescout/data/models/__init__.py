"""
Pydantic data models and schemas for RoleScout.

This module provides all data models used throughout the application,
including database documents, embedded models, and response schemas.
"""

# Base models
from .base import (
    BaseDocument,
    EmbeddedEntity,
    EmbeddedModel,
    PyObjectId,
    ResponseModel,
)

# Talent models
from .talent import TalentProfile

# Region models
from .region import (
    Location,
    LocationSummary,
    Region,
    RegionPlan,
    RegionSubscription,
    RegionSummary,
)

# Project models
from .project import (
    CastingCall,
    Project,
    Skill,
    Studio,
    TalentRequirement,
)

# Suggestion models
from .suggestion import (
    RolePayload,
    SuggestedRole,
    SuggestionResponse,
)

__all__ = [
    # Base
    "BaseDocument",
    "EmbeddedEntity",
    "EmbeddedModel",
    "PyObjectId",
    "ResponseModel",
    # Talent
    "TalentProfile",
    # Region
    "Location",
    "LocationSummary",
    "Region",
    "RegionPlan",
    "RegionSubscription",
    "RegionSummary",
    # Project
    "CastingCall",
    "Project",
    "Skill",
    "Studio",
    "TalentRequirement",
    # Suggestion
    "RolePayload",
    "SuggestedRole",
    "SuggestionResponse",
]
