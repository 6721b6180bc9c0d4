"""
Region entitlement resolution.

Works out which regions, and therefore which locations, a talent may
see roles in from their ACTIVE and TRIALING region subscriptions.
"""

import asyncio
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from bson import ObjectId
from pymongo.errors import PyMongoError

from rolescout.core.exceptions import StoreFailureError
from rolescout.data.models.region import RegionSummary
from rolescout.data.models.talent import TalentProfile
from rolescout.data.repositories import (
    LocationRepository,
    RegionPlanRepository,
    RegionRepository,
    RegionSubscriptionRepository,
    get_location_repository,
    get_plan_repository,
    get_region_repository,
    get_subscription_repository,
)
from rolescout.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class Entitlement:
    """Regions a talent has unlocked and the locations inside them."""

    region_ids: set[ObjectId] = field(default_factory=set)
    regions: list[RegionSummary] = field(default_factory=list)
    location_ids: set[ObjectId] = field(default_factory=set)

    @property
    def is_empty(self) -> bool:
        """True when the talent holds no entitling subscription."""
        return not self.region_ids


class EntitlementResolver:
    """Resolves a talent's region entitlement from their subscriptions."""

    def __init__(
        self,
        subscription_repository: Optional[RegionSubscriptionRepository] = None,
        plan_repository: Optional[RegionPlanRepository] = None,
        region_repository: Optional[RegionRepository] = None,
        location_repository: Optional[LocationRepository] = None,
    ):
        self.subscriptions = subscription_repository or get_subscription_repository()
        self.plans = plan_repository or get_plan_repository()
        self.regions = region_repository or get_region_repository()
        self.locations = location_repository or get_location_repository()

    async def resolve(self, talent: TalentProfile, as_of: datetime) -> Entitlement:
        """
        Resolve the talent's entitlement at `as_of`.

        Returns an empty entitlement (not an error) when the talent has
        no entitling subscription.

        Raises:
            StoreFailureError: if any store query fails
        """
        try:
            return await self._resolve(talent, as_of)
        except PyMongoError as exc:
            logger.error(f"Entitlement lookup failed for talent {talent.id}: {exc}")
            raise StoreFailureError("entitlement resolution") from exc

    async def _resolve(self, talent: TalentProfile, as_of: datetime) -> Entitlement:
        subscriptions = await self.subscriptions.get_entitling_by_user_async(talent.user_id)
        plan_ids = [s.region_plan_id for s in subscriptions if s.is_entitling(as_of)]
        if not plan_ids:
            return Entitlement()

        plans = await self.plans.get_many_async(plan_ids)
        region_ids = {plan.region_id for plan in plans}
        if not region_ids:
            return Entitlement()

        regions, locations = await asyncio.gather(
            self.regions.get_many_async(region_ids),
            self.locations.get_by_regions_async(region_ids),
        )

        summaries = sorted(
            (region.to_summary() for region in regions),
            key=lambda r: (r.name.lower(), r.id),
        )
        entitlement = Entitlement(
            region_ids=region_ids,
            regions=summaries,
            location_ids={location.id for location in locations},
        )
        logger.debug(
            f"Talent {talent.id} entitled to {len(region_ids)} regions, "
            f"{len(entitlement.location_ids)} locations"
        )
        return entitlement
