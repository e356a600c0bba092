"""Tests for the presentation coordinator state machine."""

import asyncio
from collections.abc import Sequence

import pytest

from fuel_finder.application.services import PresentationCoordinator, StationSearchService
from fuel_finder.domain.models import (
    BoundingBox,
    Coordinates,
    FinderMessage,
    GeocodedPlace,
    GeocodeTransportError,
    LocationDeniedError,
    PlaceNotFoundError,
    PoiTransportError,
    Station,
)
from fuel_finder.domain.models.finder_state import (
    PHASE_DISPLAYING,
    PHASE_ERROR,
    PHASE_IDLE,
    PHASE_LOADING,
    REFERENCE_SEARCH_CENTER,
    REFERENCE_USER_LOCATION,
)
from fuel_finder.domain.ports import ListSurface, MapSurface


class RecordingMapSurface(MapSurface):
    """Map surface recording every call."""

    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.marker_ids: list[str] = []

    def replace_markers(self, stations: Sequence[Station]) -> None:
        self.marker_ids = [s.id for s in stations]
        self.calls.append(("replace_markers", tuple(self.marker_ids)))

    def set_view(self, center: Coordinates, zoom: int) -> None:
        self.calls.append(("set_view", center, zoom))

    def show_user_marker(self, location: Coordinates) -> None:
        self.calls.append(("show_user_marker", location))

    def open_popup(self, station_id: str) -> None:
        self.calls.append(("open_popup", station_id))


class RecordingListSurface(ListSurface):
    """List surface recording what was rendered."""

    def __init__(self) -> None:
        self.rendered: list[str] = []
        self.nearest: Station | None = None
        self.loading_history: list[bool] = []
        self.messages: list[FinderMessage | None] = []

    def render_stations(self, stations: Sequence[Station], nearest: Station | None) -> None:
        self.rendered = [s.id for s in stations]
        self.nearest = nearest

    def set_loading(self, visible: bool) -> None:
        self.loading_history.append(visible)

    def show_message(self, message: FinderMessage | None) -> None:
        self.messages.append(message)


class ScriptedGeocoder:
    """Geocoder resolving known names; optionally waits for a release per name."""

    def __init__(self, places: dict[str, GeocodedPlace]) -> None:
        self.places = places
        self.gates: dict[str, asyncio.Event] = {}
        self.error: Exception | None = None

    async def resolve_place(self, name: str) -> GeocodedPlace:
        if name in self.gates:
            await self.gates[name].wait()
        if self.error is not None:
            raise self.error
        if name not in self.places:
            raise PlaceNotFoundError(f"No place found for '{name}'")
        return self.places[name]


class ScriptedStationRepository:
    """Repository answering bounding-box queries per place and radius queries per radius."""

    def __init__(self) -> None:
        self.by_box: dict[BoundingBox, list[Station]] = {}
        self.by_radius: dict[int, list[Station]] = {}
        self.error: Exception | None = None

    async def find_stations_in_bounding_box(self, box: BoundingBox) -> list[Station]:
        if self.error is not None:
            raise self.error
        return list(self.by_box.get(box, []))

    async def find_stations_near_point(
        self,
        center: Coordinates,  # noqa: ARG002
        radius_meters: int,
    ) -> list[Station]:
        return list(self.by_radius.get(radius_meters, []))


class FixedProvider:
    def __init__(self, location: Coordinates | None = None, error: Exception | None = None):
        self.location = location
        self.error = error

    async def current_location(self) -> Coordinates:
        if self.error is not None:
            raise self.error
        assert self.location is not None
        return self.location


class GatedProvider(FixedProvider):
    """Location provider answering only once its gate is released."""

    def __init__(self, location: Coordinates) -> None:
        super().__init__(location)
        self.gate = asyncio.Event()

    async def current_location(self) -> Coordinates:
        await self.gate.wait()
        return await super().current_location()


def make_place(name: str, lat: float, lon: float) -> GeocodedPlace:
    return GeocodedPlace(
        query=name,
        display_name=name,
        center=Coordinates(lat, lon),
        bounding_box=BoundingBox(south=lat - 0.1, north=lat + 0.1, west=lon - 0.1, east=lon + 0.1),
    )


@pytest.fixture
def places() -> dict[str, GeocodedPlace]:
    return {
        "Springfield": make_place("Springfield", 10.0, 20.0),
        "Shelbyville": make_place("Shelbyville", 30.0, 40.0),
        "Nowhere": make_place("Nowhere", -50.0, -50.0),
    }


@pytest.fixture
def geocoder(places) -> ScriptedGeocoder:
    return ScriptedGeocoder(places)


@pytest.fixture
def repo(places, station_factory) -> ScriptedStationRepository:
    repo = ScriptedStationRepository()
    repo.by_box[places["Springfield"].bounding_box] = [
        station_factory("s1", 10.05, 20.0, highway="NH44"),
        station_factory("s2", 10.01, 20.0, highway="NH48"),
        station_factory("s3", 10.08, 20.0, highway="NH48"),
    ]
    repo.by_box[places["Shelbyville"].bounding_box] = [
        station_factory("b1", 30.0, 40.0, highway="NH19"),
    ]
    return repo


@pytest.fixture
def map_surface() -> RecordingMapSurface:
    return RecordingMapSurface()


@pytest.fixture
def list_surface() -> RecordingListSurface:
    return RecordingListSurface()


@pytest.fixture
def coordinator(geocoder, repo, map_surface, list_surface) -> PresentationCoordinator:
    return PresentationCoordinator(
        StationSearchService(geocoder, repo),
        map_surface,
        list_surface,
        configured_highways=["NH44", "NH27"],
    )


@pytest.mark.asyncio
async def test_successful_search_displays_stations(coordinator, map_surface, list_surface):
    """Given a place with stations, when searching, then they are shown and the map recenters."""
    assert coordinator.state.phase == PHASE_IDLE

    phase = await coordinator.search_city("Springfield")

    assert phase == PHASE_DISPLAYING
    assert list_surface.rendered == ["s1", "s2", "s3"]
    assert map_surface.marker_ids == ["s1", "s2", "s3"]
    assert ("set_view", Coordinates(10.05, 20.0), 12) in map_surface.calls
    assert list_surface.loading_history == [True, False]
    assert list_surface.messages[-1] is None
    assert coordinator.state.search_center == Coordinates(10.0, 20.0)
    assert coordinator.state.reference_point is None


@pytest.mark.asyncio
async def test_blank_search_is_ignored(coordinator, list_surface):
    """Given a blank city name, when searching, then nothing happens."""
    phase = await coordinator.search_city("   ")

    assert phase == PHASE_IDLE
    assert list_surface.loading_history == []


@pytest.mark.asyncio
async def test_unknown_city_shows_message_and_keeps_stations(coordinator, list_surface):
    """Given displayed stations, when an unknown city is searched, then they stay intact."""
    await coordinator.search_city("Springfield")

    phase = await coordinator.search_city("Xyzzyville")

    assert phase == PHASE_ERROR
    assert list_surface.messages[-1] == FinderMessage(
        kind="place_not_found", text="City not found! Check the spelling and try again."
    )
    assert [s.id for s in coordinator.state.stations] == ["s1", "s2", "s3"]
    assert list_surface.loading_history[-1] is False


@pytest.mark.asyncio
async def test_geocode_transport_error_message(coordinator, geocoder, list_surface):
    """Given a failing geocoder, when searching, then the city search error is shown."""
    geocoder.error = GeocodeTransportError("down")

    phase = await coordinator.search_city("Springfield")

    assert phase == PHASE_ERROR
    assert list_surface.messages[-1].kind == "geocode_transport"
    assert list_surface.loading_history == [True, False]


@pytest.mark.asyncio
async def test_poi_transport_error_message(coordinator, repo, list_surface):
    """Given a failing station query, when searching, then the data fetch error is shown."""
    repo.error = PoiTransportError("down")

    phase = await coordinator.search_city("Springfield")

    assert phase == PHASE_ERROR
    assert list_surface.messages[-1].text == "Could not fetch petrol pump data. Please try again."


@pytest.mark.asyncio
async def test_exhausted_search_reports_largest_radius(coordinator, list_surface):
    """Given no stations within any radius, when searching, then the message names 320 km."""
    phase = await coordinator.search_city("Nowhere")

    assert phase == PHASE_DISPLAYING
    assert list_surface.rendered == []
    assert list_surface.messages[-1].text == (
        "No fuel stations found within 320 km of Nowhere. Try another search."
    )


@pytest.mark.asyncio
async def test_radius_fallback_sorts_from_search_center(
    coordinator, repo, station_factory, list_surface
):
    """Given stations only in a radius, when searching, then they are sorted from the center."""
    repo.by_radius[40000] = [
        station_factory("far", -50.3, -50.0),
        station_factory("near", -50.1, -50.0),
    ]

    await coordinator.search_city("Nowhere")

    assert list_surface.rendered == ["near", "far"]
    assert coordinator.state.reference_point.source == REFERENCE_SEARCH_CENTER


@pytest.mark.asyncio
async def test_stale_search_result_is_discarded(coordinator, geocoder, list_surface):
    """Given a slow first search, when a second one finishes first, then the second one wins."""
    geocoder.gates["Springfield"] = asyncio.Event()

    slow = asyncio.create_task(coordinator.search_city("Springfield"))
    await asyncio.sleep(0)
    await coordinator.search_city("Shelbyville")
    geocoder.gates["Springfield"].set()
    await slow

    assert list_surface.rendered == ["b1"]
    assert coordinator.state.search_center == Coordinates(30.0, 40.0)
    assert coordinator.state.phase == PHASE_DISPLAYING
    assert list_surface.loading_history[-1] is False


@pytest.mark.asyncio
async def test_pending_search_survives_locate_me(coordinator, geocoder, list_surface):
    """Given a slow search, when locating finishes first, then the search result still lands."""
    geocoder.gates["Springfield"] = asyncio.Event()

    search = asyncio.create_task(coordinator.search_city("Springfield"))
    await asyncio.sleep(0)
    await coordinator.locate_me(FixedProvider(Coordinates(10.0, 20.0)))

    assert list_surface.loading_history[-1] is True

    geocoder.gates["Springfield"].set()
    phase = await search

    assert phase == PHASE_DISPLAYING
    assert list_surface.rendered == ["s2", "s1", "s3"]
    assert coordinator.state.search_center == Coordinates(10.0, 20.0)
    assert coordinator.state.reference_point.source == REFERENCE_USER_LOCATION
    assert list_surface.loading_history[-1] is False


@pytest.mark.asyncio
async def test_pending_locate_survives_search(coordinator, list_surface):
    """Given a slow location request, when a search finishes first, then the position lands."""
    provider = GatedProvider(Coordinates(10.0, 20.0))

    locate = asyncio.create_task(coordinator.locate_me(provider))
    await asyncio.sleep(0)
    await coordinator.search_city("Springfield")

    assert coordinator.state.phase == PHASE_LOADING
    assert list_surface.loading_history[-1] is True

    provider.gate.set()
    phase = await locate

    assert phase == PHASE_DISPLAYING
    assert coordinator.state.user_location == Coordinates(10.0, 20.0)
    assert coordinator.nearest_station().id == "s2"
    assert list_surface.rendered == ["s2", "s1", "s3"]
    assert list_surface.loading_history[-1] is False


@pytest.mark.asyncio
async def test_stale_locate_result_is_discarded(coordinator):
    """Given a slow location request, when a newer one finishes first, then the newer one wins."""
    slow = GatedProvider(Coordinates(1.0, 1.0))

    first = asyncio.create_task(coordinator.locate_me(slow))
    await asyncio.sleep(0)
    await coordinator.locate_me(FixedProvider(Coordinates(2.0, 2.0)))
    slow.gate.set()
    await first

    assert coordinator.state.user_location == Coordinates(2.0, 2.0)
    assert coordinator.state.phase == PHASE_DISPLAYING


@pytest.mark.asyncio
async def test_locate_me_highlights_nearest_station(coordinator, map_surface, list_surface):
    """Given displayed stations, when locating, then they are sorted and the nearest is opened."""
    await coordinator.search_city("Springfield")
    map_surface.calls.clear()

    phase = await coordinator.locate_me(FixedProvider(Coordinates(10.0, 20.0)))

    assert phase == PHASE_DISPLAYING
    assert list_surface.rendered == ["s2", "s1", "s3"]
    assert list_surface.nearest is not None and list_surface.nearest.id == "s2"
    assert map_surface.calls[0] == ("show_user_marker", Coordinates(10.0, 20.0))
    assert map_surface.calls[1] == ("set_view", Coordinates(10.0, 20.0), 10)
    assert ("open_popup", "s2") in map_surface.calls
    assert map_surface.calls[-1] == ("set_view", Coordinates(10.01, 20.0), 12)
    assert coordinator.state.reference_point.source == REFERENCE_USER_LOCATION


@pytest.mark.asyncio
async def test_locate_me_without_stations_only_shows_user(coordinator, map_surface, list_surface):
    """Given no stations, when locating, then the user marker is shown and nothing is opened."""
    await coordinator.locate_me(FixedProvider(Coordinates(1.0, 2.0)))

    assert ("show_user_marker", Coordinates(1.0, 2.0)) in map_surface.calls
    assert not any(call[0] == "open_popup" for call in map_surface.calls)
    assert list_surface.nearest is None


@pytest.mark.asyncio
async def test_locate_me_does_not_open_filtered_out_nearest(coordinator, map_surface):
    """Given a filter hiding the nearest station, when locating, then no popup is opened."""
    await coordinator.search_city("Springfield")
    coordinator.filter_by_highway("NH44")

    await coordinator.locate_me(FixedProvider(Coordinates(10.0, 20.0)))

    assert coordinator.nearest_station().id == "s2"
    assert not any(call[0] == "open_popup" for call in map_surface.calls)


@pytest.mark.asyncio
async def test_locate_denied_keeps_stations(coordinator, list_surface):
    """Given a denied location request, when locating, then an error shows and stations stay."""
    await coordinator.search_city("Springfield")

    phase = await coordinator.locate_me(FixedProvider(error=LocationDeniedError("denied")))

    assert phase == PHASE_ERROR
    assert list_surface.messages[-1].kind == "location_denied"
    assert list_surface.rendered == ["s1", "s2", "s3"]
    assert list_surface.loading_history[-1] is False


@pytest.mark.asyncio
async def test_locate_without_capability_reports_unsupported(coordinator, list_surface):
    """Given no location provider, when locating, then the unsupported message is shown."""
    phase = await coordinator.locate_me()

    assert phase == PHASE_ERROR
    assert list_surface.messages[-1].text == "Geolocation is not supported by this device."


@pytest.mark.asyncio
async def test_search_after_locate_ranks_from_user(coordinator, list_surface):
    """Given a known user position, when searching another city, then distances use it."""
    await coordinator.locate_me(FixedProvider(Coordinates(10.0, 20.0)))

    await coordinator.search_city("Springfield")

    assert list_surface.rendered == ["s2", "s1", "s3"]
    assert all(s.distance_km is not None for s in coordinator.state.stations)
    assert coordinator.state.reference_point.source == REFERENCE_USER_LOCATION


@pytest.mark.asyncio
async def test_filter_narrows_and_all_restores(coordinator, map_surface, list_surface):
    """Given three stations, when filtering by NH48 and back to all, then the set is restored."""
    await coordinator.search_city("Springfield")

    shown = coordinator.filter_by_highway("NH48")

    assert [s.id for s in shown] == ["s2", "s3"]
    assert map_surface.marker_ids == ["s2", "s3"]
    assert list_surface.rendered == ["s2", "s3"]

    coordinator.filter_by_highway("all")

    assert list_surface.rendered == ["s1", "s2", "s3"]
    assert coordinator.state.highway_filter == ""


@pytest.mark.asyncio
async def test_filter_two_of_five_stations_and_clear(
    coordinator, places, repo, station_factory, map_surface, list_surface
):
    """Given five stations with two on NH48, when filtering and clearing, then all five return."""
    repo.by_box[places["Nowhere"].bounding_box] = [
        station_factory("p1", -50.0, -50.0, highway="NH44"),
        station_factory("p2", -50.01, -50.0, highway="NH48"),
        station_factory("p3", -50.02, -50.0),
        station_factory("p4", -50.03, -50.0, highway="NH48"),
        station_factory("p5", -50.04, -50.0, highway="NH7"),
    ]
    await coordinator.search_city("Nowhere")

    shown = coordinator.filter_by_highway("NH48")

    assert [s.id for s in shown] == ["p2", "p4"]
    assert map_surface.marker_ids == ["p2", "p4"]
    assert list_surface.rendered == ["p2", "p4"]
    assert len(coordinator.state.stations) == 5

    coordinator.filter_by_highway("")

    assert list_surface.rendered == ["p1", "p2", "p3", "p4", "p5"]
    assert map_surface.marker_ids == ["p1", "p2", "p3", "p4", "p5"]


@pytest.mark.asyncio
async def test_filter_persists_across_searches(coordinator, list_surface):
    """Given an active filter, when searching again, then the new results are filtered too."""
    coordinator.filter_by_highway("NH48")

    await coordinator.search_city("Springfield")

    assert list_surface.rendered == ["s2", "s3"]


@pytest.mark.asyncio
async def test_highway_options_merge_configured_and_seen(coordinator):
    """Given configured highways, when listing options, then seen tags follow in sorted order."""
    await coordinator.search_city("Springfield")

    assert coordinator.highway_options() == ["NH44", "NH27", "NH48"]
