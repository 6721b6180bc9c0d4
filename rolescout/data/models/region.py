"""
Region, location and subscription data models for RoleScout.

Regions group locations; talents unlock a region by holding a
subscription to one of its plans.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from rolescout.utils.constants import SubscriptionStatus

from .base import BaseDocument, EmbeddedModel, PyObjectId, as_utc


class Region(BaseDocument):
    """Named geographic grouping of locations."""

    name: str
    description: Optional[str] = None
    is_active: bool = True

    def to_summary(self) -> "RegionSummary":
        return RegionSummary(id=str(self.id), name=self.name)


class Location(BaseDocument):
    """A casting location. Belongs to at most one region."""

    name: str
    region_id: Optional[PyObjectId] = None

    def to_summary(self) -> "LocationSummary":
        return LocationSummary(id=str(self.id), name=self.name)


class RegionPlan(BaseDocument):
    """A purchasable plan that unlocks a single region."""

    region_id: PyObjectId
    name: str
    is_active: bool = True
    price_monthly: Optional[float] = None
    price_yearly: Optional[float] = None
    currency: str = "USD"

    @field_validator("price_monthly", "price_yearly")
    @classmethod
    def validate_price(cls, v: Optional[float]) -> Optional[float]:
        """Validate price is non-negative."""
        if v is not None and v < 0:
            raise ValueError("Price must be non-negative")
        return v


class RegionSubscription(BaseDocument):
    """
    Links a user to a region plan.

    Created at checkout and mutated by billing events; subscriptions are
    never deleted, only moved between statuses.
    """

    user_id: PyObjectId
    region_plan_id: PyObjectId
    status: SubscriptionStatus = SubscriptionStatus.ACTIVE
    current_period_end: Optional[datetime] = None

    @field_validator("current_period_end")
    @classmethod
    def normalize_period_end(cls, v: Optional[datetime]) -> Optional[datetime]:
        return as_utc(v)

    def is_entitling(self, as_of: datetime) -> bool:
        """
        Whether this subscription unlocks its region at `as_of`.

        Only ACTIVE and TRIALING subscriptions count, and only until the
        end of the paid period when one is recorded.
        """
        if not SubscriptionStatus(self.status).confers_entitlement:
            return False
        if self.current_period_end is None:
            return True
        return self.current_period_end >= as_utc(as_of)


# Lightweight summaries embedded in responses


class RegionSummary(EmbeddedModel):
    """Region id/name pair."""

    id: str
    name: str


class LocationSummary(EmbeddedModel):
    """Location id/name pair."""

    id: str
    name: str
