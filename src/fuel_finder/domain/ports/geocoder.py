"""Geocoder port."""

from typing import Protocol

from fuel_finder.domain.models.geo import GeocodedPlace


class Geocoder(Protocol):
    """Port for resolving free-text place names."""

    async def resolve_place(self, name: str) -> GeocodedPlace:
        """Resolve a place name to its center and bounding box.

        Raises:
            PlaceNotFoundError: If the service has no candidate for the name.
            GeocodeTransportError: If the request or response parsing fails.
        """
        ...
