"""Domain models for the fuel finder."""

from fuel_finder.domain.models.error_details import ErrorDetails
from fuel_finder.domain.models.errors import (
    FuelFinderError,
    GeocodeTransportError,
    LocationDeniedError,
    LocationError,
    LocationTimeoutError,
    LocationUnavailableError,
    LocationUnsupportedError,
    PlaceNotFoundError,
    PoiTransportError,
)
from fuel_finder.domain.models.finder_state import FinderMessage, FinderState, ReferencePoint
from fuel_finder.domain.models.geo import BoundingBox, Coordinates, GeocodedPlace
from fuel_finder.domain.models.search_result import StationSearchResult
from fuel_finder.domain.models.station import Station

__all__ = [
    "BoundingBox",
    "Coordinates",
    "ErrorDetails",
    "FinderMessage",
    "FinderState",
    "FuelFinderError",
    "GeocodeTransportError",
    "GeocodedPlace",
    "LocationDeniedError",
    "LocationError",
    "LocationTimeoutError",
    "LocationUnavailableError",
    "LocationUnsupportedError",
    "PlaceNotFoundError",
    "PoiTransportError",
    "ReferencePoint",
    "Station",
    "StationSearchResult",
]
