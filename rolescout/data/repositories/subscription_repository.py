"""
Region subscription and plan repositories for RoleScout.

Subscriptions are written by the billing integration; this module only
reads them to work out which regions a talent has unlocked.
"""

from typing import Optional

from bson import ObjectId

from rolescout.data.models.region import RegionPlan, RegionSubscription
from rolescout.utils.constants import ENTITLING_SUBSCRIPTION_STATUSES

from .base import BaseRepository


class RegionSubscriptionRepository(BaseRepository[RegionSubscription]):
    """Repository for region subscription documents."""

    @property
    def collection_name(self) -> str:
        return "region_subscriptions"

    @property
    def model_class(self) -> type[RegionSubscription]:
        return RegionSubscription

    async def get_entitling_by_user_async(
        self, user_id: str | ObjectId
    ) -> list[RegionSubscription]:
        """Get the user's ACTIVE and TRIALING subscriptions."""
        return await self.find_async(
            {
                "user_id": self._to_object_id(user_id),
                "status": {"$in": sorted(s.value for s in ENTITLING_SUBSCRIPTION_STATUSES)},
            }
        )


class RegionPlanRepository(BaseRepository[RegionPlan]):
    """Repository for region plan documents."""

    @property
    def collection_name(self) -> str:
        return "region_plans"

    @property
    def model_class(self) -> type[RegionPlan]:
        return RegionPlan


# Singleton instances
_subscription_repository: Optional[RegionSubscriptionRepository] = None
_plan_repository: Optional[RegionPlanRepository] = None


def get_subscription_repository() -> RegionSubscriptionRepository:
    """Get the region subscription repository singleton instance."""
    global _subscription_repository
    if _subscription_repository is None:
        _subscription_repository = RegionSubscriptionRepository()
    return _subscription_repository


def get_plan_repository() -> RegionPlanRepository:
    """Get the region plan repository singleton instance."""
    global _plan_repository
    if _plan_repository is None:
        _plan_repository = RegionPlanRepository()
    return _plan_repository
