"""City search use case: bounding-box query with an expanding-radius fallback."""

import logging
from typing import TYPE_CHECKING

from fuel_finder.application.services.station_ranking import with_distances
from fuel_finder.domain.models import GeocodedPlace, StationSearchResult
from fuel_finder.domain.models.search_result import (
    OUTCOME_BOUNDING_BOX,
    OUTCOME_EXHAUSTED,
    OUTCOME_RADIUS_FALLBACK,
)

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from fuel_finder.domain.ports import Geocoder, StationRepository

INITIAL_SEARCH_RADIUS_METERS = 20_000
MAX_RADIUS_ATTEMPTS = 5


class StationSearchService:
    """Resolves a place name to the fuel stations around it.

    The geocoded bounding box is queried first. When it holds no stations the
    service searches a circle around the geocoded center, doubling the radius
    after every empty answer until ``max_radius_attempts`` queries were made.
    """

    def __init__(
        self,
        geocoder: "Geocoder",
        station_repository: "StationRepository",
        initial_radius_meters: int = INITIAL_SEARCH_RADIUS_METERS,
        max_radius_attempts: int = MAX_RADIUS_ATTEMPTS,
    ) -> None:
        """Initialize with the geocoder and station repository ports.

        Args:
            geocoder: Port resolving place names.
            station_repository: Port querying fuel stations.
            initial_radius_meters: Radius of the first fallback query.
            max_radius_attempts: Total number of fallback queries.
        """
        if initial_radius_meters <= 0:
            raise ValueError("initial_radius_meters must be positive")
        if max_radius_attempts < 1:
            raise ValueError("max_radius_attempts must be at least 1")
        self._geocoder = geocoder
        self._station_repository = station_repository
        self._initial_radius_meters = initial_radius_meters
        self._max_radius_attempts = max_radius_attempts

    def radius_sequence(self) -> list[int]:
        """Radii in meters the fallback tries, in order."""
        return [self._initial_radius_meters * 2**i for i in range(self._max_radius_attempts)]

    async def geocode(self, place_name: str) -> GeocodedPlace:
        """Resolve a place name; blank names are rejected."""
        name = place_name.strip()
        if not name:
            raise ValueError("place name must not be empty")
        return await self._geocoder.resolve_place(name)

    async def find_stations_for_place(self, place: GeocodedPlace) -> StationSearchResult:
        """Run the bounding-box query and, if it is empty, the radius fallback."""
        stations = await self._station_repository.find_stations_in_bounding_box(place.bounding_box)
        if stations:
            logger.info(
                f"Found {len(stations)} station(s) inside the bounding box of '{place.query}'"
            )
            return StationSearchResult(
                place=place, stations=tuple(stations), outcome=OUTCOME_BOUNDING_BOX
            )

        logger.info(f"No stations inside the bounding box of '{place.query}', expanding radius")
        attempted: list[int] = []
        for radius in self.radius_sequence():
            attempted.append(radius)
            stations = await self._station_repository.find_stations_near_point(
                place.center, radius
            )
            if stations:
                logger.info(
                    f"Found {len(stations)} station(s) within {radius} m of '{place.query}'"
                )
                return StationSearchResult(
                    place=place,
                    stations=with_distances(stations, place.center),
                    outcome=OUTCOME_RADIUS_FALLBACK,
                    reference_point=place.center,
                    radius_meters=radius,
                    attempted_radii=tuple(attempted),
                )
            logger.debug(f"No stations within {radius} m of '{place.query}'")

        logger.info(
            f"Radius search for '{place.query}' exhausted after {len(attempted)} attempt(s)"
        )
        return StationSearchResult(
            place=place,
            stations=(),
            outcome=OUTCOME_EXHAUSTED,
            radius_meters=attempted[-1],
            attempted_radii=tuple(attempted),
        )

    async def search_city(self, place_name: str) -> StationSearchResult:
        """Geocode a place name and find the stations for it.

        Raises:
            ValueError: If the place name is blank.
            PlaceNotFoundError: If the place cannot be geocoded.
            GeocodeTransportError: If the geocoding request fails.
            PoiTransportError: If a station query fails.
        """
        place = await self.geocode(place_name)
        return await self.find_stations_for_place(place)
