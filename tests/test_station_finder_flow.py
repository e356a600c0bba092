"""End-to-end tests: HTTP adapters, search service and coordinator wired together."""

from typing import Any

import pytest

from fuel_finder.adapters.formatters import StationFormatter
from fuel_finder.adapters.nominatim_api import NominatimGeocoder
from fuel_finder.adapters.overpass_api import OverpassStationRepository
from fuel_finder.adapters.web.state import StationsState
from fuel_finder.adapters.web.surfaces import LiveViewListSurface, LiveViewMapSurface
from fuel_finder.application.services import PresentationCoordinator, StationSearchService
from fuel_finder.domain.models import Coordinates
from fuel_finder.domain.models.finder_state import PHASE_DISPLAYING, REFERENCE_SEARCH_CENTER
from fuel_finder.domain.models.search_result import OUTCOME_RADIUS_FALLBACK

SPRINGFIELD_RESULT = {
    "display_name": "Springfield, Sangamon County, Illinois, United States",
    "lat": "39.78",
    "lon": "-89.65",
    "boundingbox": ["39.70", "39.86", "-89.75", "-89.55"],
}

PETROL_STATION = {
    "type": "node",
    "id": 4242,
    "lat": 39.80,
    "lon": -89.60,
    "tags": {"amenity": "fuel", "name": "Prairie Fuel", "fuel_petrol": "yes"},
}


@pytest.fixture
def springfield_session(mock_session, response_factory):
    """Session answering Nominatim with Springfield and Overpass only at 40 km."""
    overpass_queries: list[str] = []

    def get(url: str, params: dict[str, Any] | None = None, **_kwargs: Any):
        params = params or {}
        if "q" in params:
            return response_factory(payload=[SPRINGFIELD_RESULT])
        query = params["data"]
        overpass_queries.append(query)
        if "around:40000," in query:
            return response_factory(payload={"elements": [PETROL_STATION]})
        return response_factory(payload={"elements": []})

    mock_session.get.side_effect = get
    mock_session.overpass_queries = overpass_queries
    return mock_session


@pytest.mark.asyncio
async def test_springfield_found_by_radius_fallback(springfield_session) -> None:
    """Given no stations in the box or at 20 km, when searching Springfield, then 40 km wins.

    The single node tagged fuel_petrol=yes is parsed into a Petrol station, the
    geocoded center becomes the reference point and the distance is displayed.
    """
    service = StationSearchService(
        NominatimGeocoder(springfield_session),
        OverpassStationRepository(springfield_session),
    )
    formatter = StationFormatter()
    state = StationsState()
    coordinator = PresentationCoordinator(
        service, LiveViewMapSurface(state, formatter), LiveViewListSurface(state, formatter)
    )

    phase = await coordinator.search_city("Springfield")

    assert phase == PHASE_DISPLAYING
    assert coordinator.state.search_center == Coordinates(39.78, -89.65)
    assert coordinator.state.last_outcome == OUTCOME_RADIUS_FALLBACK

    queries = springfield_session.overpass_queries
    assert len(queries) == 3
    assert "(39.7,-89.75,39.86,-89.55)" in queries[0]
    assert "around:20000,39.78,-89.65" in queries[1]
    assert "around:40000,39.78,-89.65" in queries[2]

    (station,) = coordinator.state.stations
    assert station.id == "4242"
    assert station.coordinates == Coordinates(39.80, -89.60)
    assert list(station.services) == ["Petrol"]
    assert station.distance_km == pytest.approx(4.82, abs=0.01)

    reference = coordinator.state.reference_point
    assert reference.source == REFERENCE_SEARCH_CENTER
    assert reference.coordinates == Coordinates(39.78, -89.65)

    (item,) = state.stations
    assert item["distance"] == "4.8 km away"
    assert item["services"] == ["Petrol"]
    assert state.loading is False
