"""Geographic domain models."""

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """A latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True)
class BoundingBox:
    """Rectangular extent of a place."""

    south: float
    north: float
    west: float
    east: float

    @classmethod
    def from_nominatim(cls, values: Sequence[str | float]) -> "BoundingBox":
        """Build from Nominatim's ``[south, north, west, east]`` array.

        Raises:
            ValueError: If the array does not hold four numeric values.
        """
        if len(values) != 4:
            raise ValueError(f"bounding box must have 4 values, got {len(values)}")
        south, north, west, east = (float(v) for v in values)
        return cls(south=south, north=north, west=west, east=east)

    def to_overpass(self) -> str:
        """Render in Overpass filter order: south,west,north,east."""
        return f"{self.south},{self.west},{self.north},{self.east}"


@dataclass(frozen=True)
class GeocodedPlace:
    """A place name resolved to a center point and an extent."""

    query: str
    display_name: str
    center: Coordinates
    bounding_box: BoundingBox
