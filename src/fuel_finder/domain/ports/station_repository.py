"""Station repository port."""

from typing import Protocol

from fuel_finder.domain.models.geo import BoundingBox, Coordinates
from fuel_finder.domain.models.station import Station


class StationRepository(Protocol):
    """Port for retrieving fuel stations from a point-of-interest service.

    Returned stations keep the order the service delivered them in.
    """

    async def find_stations_in_bounding_box(self, box: BoundingBox) -> list[Station]:
        """Find fuel stations inside a bounding box."""
        ...

    async def find_stations_near_point(
        self, center: Coordinates, radius_meters: int
    ) -> list[Station]:
        """Find fuel stations within a radius around a point."""
        ...
