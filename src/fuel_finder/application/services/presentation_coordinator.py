"""Presentation coordinator: owns the finder state and drives the rendering surfaces."""

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from fuel_finder.application.services.station_ranking import (
    displayed_stations,
    find_nearest,
    is_all_highways,
    with_distances,
)
from fuel_finder.domain.models import (
    FinderMessage,
    FinderState,
    FuelFinderError,
    LocationError,
    LocationUnsupportedError,
    ReferencePoint,
    Station,
    StationSearchResult,
)
from fuel_finder.domain.models.errors import (
    KIND_GEOCODE_TRANSPORT,
    KIND_LOCATION_DENIED,
    KIND_LOCATION_TIMEOUT,
    KIND_LOCATION_UNAVAILABLE,
    KIND_LOCATION_UNSUPPORTED,
    KIND_PLACE_NOT_FOUND,
    KIND_POI_TRANSPORT,
    KIND_SEARCH_EXHAUSTED,
)
from fuel_finder.domain.models.finder_state import (
    PHASE_DISPLAYING,
    PHASE_ERROR,
    PHASE_LOADING,
    REFERENCE_SEARCH_CENTER,
    REFERENCE_USER_LOCATION,
)
from fuel_finder.domain.models.station import NOT_APPLICABLE

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from fuel_finder.application.services.station_search_service import StationSearchService
    from fuel_finder.domain.ports import ListSurface, LocationProvider, MapSurface

STATION_ZOOM = 12
USER_ZOOM = 10

ACTION_SEARCH = "search"
ACTION_LOCATE = "locate"

MESSAGES: dict[str, str] = {
    KIND_PLACE_NOT_FOUND: "City not found! Check the spelling and try again.",
    KIND_GEOCODE_TRANSPORT: "An error occurred while searching for the city. Please try again.",
    KIND_POI_TRANSPORT: "Could not fetch petrol pump data. Please try again.",
    KIND_SEARCH_EXHAUSTED: (
        "No fuel stations found within {radius_km} km of {place}. Try another search."
    ),
    KIND_LOCATION_UNSUPPORTED: "Geolocation is not supported by this device.",
    KIND_LOCATION_DENIED: (
        "Unable to get your location. Please ensure location services are enabled."
    ),
    KIND_LOCATION_TIMEOUT: "Locating you took too long. Please try again.",
    KIND_LOCATION_UNAVAILABLE: "Your position is currently unavailable. Please try again.",
}


def message_for(kind: str, **values: object) -> FinderMessage:
    """Build the user-visible message for an error or outcome kind."""
    template = MESSAGES.get(kind, "Something went wrong. Please try again.")
    return FinderMessage(kind=kind, text=template.format(**values))


class PresentationCoordinator:
    """Runs user actions against the search service and pushes results to the surfaces.

    Searches and location requests each carry their own sequence number. A
    search result that arrives after a newer search has started is dropped,
    and likewise for location results, so a slow response can never overwrite
    state written by a later action of the same kind. A search and a location
    request may overlap; both are applied. The loading indicator stays on until
    every running action has settled.

    Reference point precedence is "most recent action wins": locating the user
    makes the user's position the reference; a search whose stations came from
    the radius fallback makes the searched place's center the reference. A
    bounding-box search keeps a user-position reference but drops a reference to
    the center of an earlier search.
    """

    def __init__(
        self,
        search_service: "StationSearchService",
        map_surface: "MapSurface",
        list_surface: "ListSurface",
        location_provider: "LocationProvider | None" = None,
        configured_highways: Iterable[str] = (),
        station_zoom: int = STATION_ZOOM,
        user_zoom: int = USER_ZOOM,
    ) -> None:
        """Initialize the coordinator.

        Args:
            search_service: City search use case.
            map_surface: Map rendering surface.
            list_surface: List rendering surface.
            location_provider: Default device location capability; ``None`` means unsupported.
            configured_highways: Highway values always offered by the filter.
            station_zoom: Zoom level used when centering on a station.
            user_zoom: Zoom level used when centering on the user.
        """
        self._search_service = search_service
        self._map = map_surface
        self._list = list_surface
        self._location_provider = location_provider
        self._station_zoom = station_zoom
        self._user_zoom = user_zoom
        self._sequences = {ACTION_SEARCH: 0, ACTION_LOCATE: 0}
        self._pending = 0
        self.state = FinderState(configured_highways=list(configured_highways))
        self._settled_phase = self.state.phase

    # ------------------------------------------------------------------
    # User actions
    # ------------------------------------------------------------------

    async def search_city(self, name: str) -> str:
        """Search fuel stations for a place name and return the resulting phase."""
        query = name.strip()
        if not query:
            logger.debug("Ignoring search with empty place name")
            return self.state.phase

        sequence = self._begin_action(ACTION_SEARCH)
        try:
            await self._run_search(query, sequence)
        finally:
            self._end_action()
        return self.state.phase

    async def locate_me(self, provider: "LocationProvider | None" = None) -> str:
        """Locate the user, rank stations by distance and highlight the nearest one."""
        sequence = self._begin_action(ACTION_LOCATE)
        try:
            await self._run_locate(provider or self._location_provider, sequence)
        finally:
            self._end_action()
        return self.state.phase

    def filter_by_highway(self, highway: str | None) -> list[Station]:
        """Narrow the displayed stations to one highway; "all" or empty clears the filter."""
        self.state.highway_filter = "" if is_all_highways(highway) else (highway or "").strip()
        return self._render(recenter=False)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def displayed_stations(self) -> list[Station]:
        """Stations currently shown, after filtering and distance sorting."""
        return displayed_stations(
            self.state.stations,
            self.state.highway_filter,
            sort_by_reference=self.state.reference_point is not None,
        )

    def nearest_station(self) -> Station | None:
        """The station highlighted as nearest by the last locate action."""
        if self.state.nearest_station_id is None:
            return None
        for station in self.state.stations:
            if station.id == self.state.nearest_station_id:
                return station
        return None

    def highway_options(self) -> list[str]:
        """Highway values for the filter: configured ones first, then those seen in results."""
        options = list(self.state.configured_highways)
        seen = {
            s.highway_tag
            for s in self.state.stations
            if s.highway_tag and s.highway_tag != NOT_APPLICABLE
        }
        options.extend(sorted(seen - set(options)))
        return options

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    async def _run_search(self, query: str, sequence: int) -> None:
        self.state.last_query = query

        try:
            place = await self._search_service.geocode(query)
        except FuelFinderError as e:
            if self._is_current(ACTION_SEARCH, sequence):
                self._fail(e)
            return

        if not self._is_current(ACTION_SEARCH, sequence):
            return
        self.state.search_center = place.center

        try:
            result = await self._search_service.find_stations_for_place(place)
        except FuelFinderError as e:
            if self._is_current(ACTION_SEARCH, sequence):
                self._fail(e)
            return

        if self._is_current(ACTION_SEARCH, sequence):
            self._apply_search_result(result)

    async def _run_locate(self, provider: "LocationProvider | None", sequence: int) -> None:
        if provider is None:
            self._fail(LocationUnsupportedError("No location capability is available"))
            return

        try:
            location = await provider.current_location()
        except LocationError as e:
            if self._is_current(ACTION_LOCATE, sequence):
                self._fail(e)
            return

        if not self._is_current(ACTION_LOCATE, sequence):
            return

        self.state.user_location = location
        self.state.reference_point = ReferencePoint(
            source=REFERENCE_USER_LOCATION, coordinates=location
        )
        self.state.stations = with_distances(self.state.stations, location)
        nearest = find_nearest(self.state.stations)
        self.state.nearest_station_id = nearest.id if nearest else None

        self._map.show_user_marker(location)
        self._map.set_view(location, self._user_zoom)
        shown = self._render(recenter=False)
        if nearest is not None and nearest in shown:
            self._map.open_popup(nearest.id)
            self._map.set_view(nearest.coordinates, self._station_zoom)
            logger.info(f"Nearest station: {nearest.name} ({nearest.distance_km:.1f} km)")

        self._finish(PHASE_DISPLAYING, None)

    def _begin_action(self, action: str) -> int:
        self._sequences[action] += 1
        self._pending += 1
        self.state.phase = PHASE_LOADING
        self._list.set_loading(True)
        return self._sequences[action]

    def _is_current(self, action: str, sequence: int) -> bool:
        if sequence != self._sequences[action]:
            logger.debug(f"Discarding result of superseded {action} #{sequence}")
            return False
        return True

    def _end_action(self) -> None:
        self._pending -= 1
        if self._pending:
            self.state.phase = PHASE_LOADING
            return
        self.state.phase = self._settled_phase
        self._list.set_loading(False)

    def _finish(self, phase: str, message: FinderMessage | None) -> None:
        self._settled_phase = phase
        self.state.phase = phase
        self.state.message = message
        self._list.show_message(message)

    def _fail(self, error: FuelFinderError) -> None:
        logger.warning(f"{error.kind}: {error}")
        self._finish(PHASE_ERROR, message_for(error.kind))

    def _apply_search_result(self, result: StationSearchResult) -> None:
        stations = result.stations
        reference = self.state.reference_point
        if result.reference_point is not None:
            reference = ReferencePoint(
                source=REFERENCE_SEARCH_CENTER, coordinates=result.reference_point
            )
        elif reference is not None and reference.source == REFERENCE_SEARCH_CENTER:
            reference = None

        if reference is not None and reference.source == REFERENCE_USER_LOCATION:
            stations = with_distances(stations, reference.coordinates)

        self.state.reference_point = reference
        self.state.stations = tuple(stations)
        self.state.nearest_station_id = None
        self.state.last_outcome = result.outcome

        message = None
        if result.is_exhausted:
            radius_km = (result.radius_meters or 0) // 1000
            message = message_for(
                KIND_SEARCH_EXHAUSTED, radius_km=radius_km, place=result.place.query
            )

        self._render(recenter=True)
        self._finish(PHASE_DISPLAYING, message)

    def _render(self, recenter: bool) -> list[Station]:
        shown = self.displayed_stations()
        nearest = self.nearest_station()
        self._map.replace_markers(shown)
        self._list.render_stations(shown, nearest if nearest in shown else None)
        if recenter and shown:
            self._map.set_view(shown[0].coordinates, self._station_zoom)
        return shown
