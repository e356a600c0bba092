"""Ports (interfaces) for the ports-and-adapters architecture."""

from fuel_finder.domain.ports.display_adapter import DisplayAdapter
from fuel_finder.domain.ports.finder_coordinator import CoordinatorFactory, FinderCoordinator
from fuel_finder.domain.ports.geocoder import Geocoder
from fuel_finder.domain.ports.list_surface import ListSurface
from fuel_finder.domain.ports.location_provider import LocationProvider
from fuel_finder.domain.ports.map_surface import MapSurface
from fuel_finder.domain.ports.station_repository import StationRepository

__all__ = [
    "CoordinatorFactory",
    "DisplayAdapter",
    "FinderCoordinator",
    "Geocoder",
    "ListSurface",
    "LocationProvider",
    "MapSurface",
    "StationRepository",
]
