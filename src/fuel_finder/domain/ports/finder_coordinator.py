"""Finder coordinator port used by front ends."""

from collections.abc import Callable
from typing import Protocol

from fuel_finder.domain.models.finder_state import FinderState
from fuel_finder.domain.models.station import Station
from fuel_finder.domain.ports.list_surface import ListSurface
from fuel_finder.domain.ports.location_provider import LocationProvider
from fuel_finder.domain.ports.map_surface import MapSurface


class FinderCoordinator(Protocol):
    """Port for the object running user actions of one finder session."""

    state: FinderState

    async def search_city(self, name: str) -> str:
        """Search stations for a place name; returns the resulting phase."""
        ...

    async def locate_me(self, provider: LocationProvider | None = None) -> str:
        """Locate the user and highlight the nearest station; returns the resulting phase."""
        ...

    def filter_by_highway(self, highway: str | None) -> list[Station]:
        """Narrow the displayed stations to one highway."""
        ...

    def displayed_stations(self) -> list[Station]:
        """Stations currently shown."""
        ...

    def highway_options(self) -> list[str]:
        """Values offered by the highway filter."""
        ...


# Builds a coordinator bound to a session's rendering surfaces
CoordinatorFactory = Callable[[MapSurface, ListSurface], FinderCoordinator]
