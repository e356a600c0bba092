"""Overpass API station adapter."""

from fuel_finder.adapters.overpass_api.element_parser import ElementParser, derive_services
from fuel_finder.adapters.overpass_api.overpass_station_repository import (
    OverpassStationRepository,
)

__all__ = ["ElementParser", "OverpassStationRepository", "derive_services"]
