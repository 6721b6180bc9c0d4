"""
Database repositories for RoleScout data access.

This module provides repository classes for all database collections,
implementing the repository pattern for clean data access.
"""

# Base repository
from .base import BaseRepository

# Entity repositories
from .talent_repository import TalentProfileRepository, get_talent_repository
from .subscription_repository import (
    RegionPlanRepository,
    RegionSubscriptionRepository,
    get_plan_repository,
    get_subscription_repository,
)
from .region_repository import (
    LocationRepository,
    RegionRepository,
    get_location_repository,
    get_region_repository,
)
from .project_repository import (
    ProjectRepository,
    StudioRepository,
    candidacy_filter,
    get_project_repository,
    get_studio_repository,
)

__all__ = [
    # Base
    "BaseRepository",
    # Talent
    "TalentProfileRepository",
    "get_talent_repository",
    # Subscriptions
    "RegionPlanRepository",
    "RegionSubscriptionRepository",
    "get_plan_repository",
    "get_subscription_repository",
    # Regions
    "LocationRepository",
    "RegionRepository",
    "get_location_repository",
    "get_region_repository",
    # Projects
    "ProjectRepository",
    "StudioRepository",
    "candidacy_filter",
    "get_project_repository",
    "get_studio_repository",
]
