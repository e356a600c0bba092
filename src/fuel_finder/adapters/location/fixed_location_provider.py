"""Location providers that need no external service."""

from fuel_finder.domain.models import Coordinates, LocationUnsupportedError
from fuel_finder.domain.ports.location_provider import LocationProvider


class FixedLocationProvider(LocationProvider):
    """Reports a configured position."""

    def __init__(self, latitude: float, longitude: float) -> None:
        self._location = Coordinates(latitude=latitude, longitude=longitude)

    async def current_location(self) -> Coordinates:
        return self._location


class UnsupportedLocationProvider(LocationProvider):
    """Stands for a device without any location capability."""

    async def current_location(self) -> Coordinates:
        raise LocationUnsupportedError("Geolocation is not supported on this device")
