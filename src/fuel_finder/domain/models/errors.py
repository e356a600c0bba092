"""Error taxonomy for station search and location requests.

Every failure a user action can hit is one of these exceptions. They are raised
by adapters and the search service and recovered by the presentation
coordinator, which maps each ``kind`` to a user-visible message.
"""

from typing import ClassVar

from fuel_finder.domain.models.error_details import ErrorDetails

KIND_PLACE_NOT_FOUND = "place_not_found"
KIND_GEOCODE_TRANSPORT = "geocode_transport"
KIND_POI_TRANSPORT = "poi_transport"
KIND_SEARCH_EXHAUSTED = "search_exhausted"
KIND_LOCATION_UNSUPPORTED = "location_unsupported"
KIND_LOCATION_DENIED = "location_denied"
KIND_LOCATION_TIMEOUT = "location_timeout"
KIND_LOCATION_UNAVAILABLE = "location_unavailable"


class FuelFinderError(Exception):
    """Base class for recoverable fuel finder errors."""

    kind: ClassVar[str] = "unknown"

    def __init__(self, message: str, details: ErrorDetails | None = None) -> None:
        super().__init__(message)
        self.details = details


class PlaceNotFoundError(FuelFinderError):
    """The geocoding service returned no candidates for the query."""

    kind = KIND_PLACE_NOT_FOUND


class GeocodeTransportError(FuelFinderError):
    """The geocoding request failed or returned an unreadable response."""

    kind = KIND_GEOCODE_TRANSPORT


class PoiTransportError(FuelFinderError):
    """The point-of-interest query failed or returned an unreadable response."""

    kind = KIND_POI_TRANSPORT


class LocationError(FuelFinderError):
    """Base class for device location failures."""


class LocationUnsupportedError(LocationError):
    kind = KIND_LOCATION_UNSUPPORTED


class LocationDeniedError(LocationError):
    kind = KIND_LOCATION_DENIED


class LocationTimeoutError(LocationError):
    kind = KIND_LOCATION_TIMEOUT


class LocationUnavailableError(LocationError):
    """Position could not be determined for any other reason."""

    kind = KIND_LOCATION_UNAVAILABLE
