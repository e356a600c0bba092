"""Shared fixtures for fuel finder tests."""

from collections.abc import Callable
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from fuel_finder.domain.models import BoundingBox, Coordinates, GeocodedPlace, Station


def make_response(status: int = 200, payload: Any = None, text: str = "") -> MagicMock:
    """Create a mock aiohttp response usable as an async context manager."""
    response = MagicMock()
    response.status = status
    response.reason = "OK" if status == 200 else "Error"
    response.json = AsyncMock(return_value=payload)
    response.text = AsyncMock(return_value=text)

    context = MagicMock()
    context.__aenter__ = AsyncMock(return_value=response)
    context.__aexit__ = AsyncMock(return_value=False)
    return context


@pytest.fixture
def response_factory() -> Callable[..., MagicMock]:
    """Factory for mock aiohttp responses."""
    return make_response


@pytest.fixture
def mock_session() -> MagicMock:
    """A mock aiohttp ClientSession; set ``get.return_value`` or ``get.side_effect``."""
    session = MagicMock()
    session.get = MagicMock()
    return session


@pytest.fixture
def springfield() -> GeocodedPlace:
    """A geocoded place whose bounding box is around (10, 20)."""
    return GeocodedPlace(
        query="Springfield",
        display_name="Springfield, Somewhere",
        center=Coordinates(latitude=10.0, longitude=20.0),
        bounding_box=BoundingBox(south=9.9, north=10.1, west=19.9, east=20.1),
    )


@pytest.fixture
def station_factory() -> Callable[..., Station]:
    """Factory for stations with sensible defaults."""

    def factory(
        station_id: str,
        latitude: float = 10.0,
        longitude: float = 20.0,
        highway: str = "N/A",
        distance_km: float | None = None,
        name: str | None = None,
    ) -> Station:
        return Station(
            id=station_id,
            coordinates=Coordinates(latitude=latitude, longitude=longitude),
            name=name or f"Station {station_id}",
            highway_tag=highway,
            address="Address not available",
            hours="N/A",
            distance_km=distance_km,
        )

    return factory
