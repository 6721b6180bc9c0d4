"""
Region and location repositories for RoleScout.
"""

from typing import Iterable, Optional

from bson import ObjectId

from rolescout.data.models.region import Location, Region

from .base import BaseRepository


class RegionRepository(BaseRepository[Region]):
    """Repository for region documents."""

    @property
    def collection_name(self) -> str:
        return "regions"

    @property
    def model_class(self) -> type[Region]:
        return Region


class LocationRepository(BaseRepository[Location]):
    """Repository for location documents."""

    @property
    def collection_name(self) -> str:
        return "locations"

    @property
    def model_class(self) -> type[Location]:
        return Location

    async def get_by_regions_async(
        self, region_ids: Iterable[str | ObjectId]
    ) -> list[Location]:
        """Get every location belonging to one of the given regions."""
        object_ids = self._to_object_ids(region_ids)
        if not object_ids:
            return []
        return await self.find_async({"region_id": {"$in": object_ids}})


# Singleton instances
_region_repository: Optional[RegionRepository] = None
_location_repository: Optional[LocationRepository] = None


def get_region_repository() -> RegionRepository:
    """Get the region repository singleton instance."""
    global _region_repository
    if _region_repository is None:
        _region_repository = RegionRepository()
    return _region_repository


def get_location_repository() -> LocationRepository:
    """Get the location repository singleton instance."""
    global _location_repository
    if _location_repository is None:
        _location_repository = LocationRepository()
    return _location_repository
