"""Adapters layer - external system integrations."""

from fuel_finder.adapters.config import AppConfig
from fuel_finder.adapters.nominatim_api import NominatimGeocoder
from fuel_finder.adapters.overpass_api import OverpassStationRepository

__all__ = ["AppConfig", "NominatimGeocoder", "OverpassStationRepository"]
