"""Domain layer - core models and ports."""

from fuel_finder.domain.models import (
    BoundingBox,
    Coordinates,
    GeocodedPlace,
    Station,
    StationSearchResult,
)
from fuel_finder.domain.ports import (
    Geocoder,
    ListSurface,
    LocationProvider,
    MapSurface,
    StationRepository,
)

__all__ = [
    "BoundingBox",
    "Coordinates",
    "GeocodedPlace",
    "Geocoder",
    "ListSurface",
    "LocationProvider",
    "MapSurface",
    "Station",
    "StationRepository",
    "StationSearchResult",
]
