"""Station search result domain model."""

from dataclasses import dataclass

from fuel_finder.domain.models.geo import Coordinates, GeocodedPlace
from fuel_finder.domain.models.station import Station

OUTCOME_BOUNDING_BOX = "bounding_box"
OUTCOME_RADIUS_FALLBACK = "radius_fallback"
OUTCOME_EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class StationSearchResult:
    """Final result of a city search pipeline run."""

    place: GeocodedPlace
    stations: tuple[Station, ...]
    outcome: str  # One of the OUTCOME_* constants
    reference_point: Coordinates | None = None  # Set only when the radius fallback found stations
    radius_meters: int | None = None  # Radius of the successful (or last) fallback attempt
    attempted_radii: tuple[int, ...] = ()

    @property
    def is_exhausted(self) -> bool:
        return self.outcome == OUTCOME_EXHAUSTED
