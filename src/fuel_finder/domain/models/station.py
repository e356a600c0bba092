"""Fuel station domain model."""

from dataclasses import dataclass, replace

from fuel_finder.domain.models.geo import Coordinates

DEFAULT_STATION_NAME = "Petrol Pump"
NOT_APPLICABLE = "N/A"
DEFAULT_ADDRESS = "Address not available"


@dataclass(frozen=True)
class Station:
    """A fuel station point of interest."""

    id: str
    coordinates: Coordinates
    name: str = DEFAULT_STATION_NAME
    highway_tag: str = NOT_APPLICABLE
    address: str = DEFAULT_ADDRESS
    hours: str = NOT_APPLICABLE
    services: tuple[str, ...] = ()
    distance_km: float | None = None  # Only meaningful relative to the current reference point

    @property
    def latitude(self) -> float:
        return self.coordinates.latitude

    @property
    def longitude(self) -> float:
        return self.coordinates.longitude

    def with_distance(self, distance_km: float | None) -> "Station":
        """Return a copy carrying the given distance."""
        return replace(self, distance_km=distance_km)
