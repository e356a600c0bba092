"""Location reported by the browser's Geolocation API.

The page asks the browser for a position and pushes either a ``located``
event with ``lat``/``lon`` or a ``locate_failed`` event with a ``code``. The
codes follow ``GeolocationPositionError`` (1 permission denied, 2 position
unavailable, 3 timeout); ``"unsupported"`` means ``navigator.geolocation`` is
missing.
"""

from collections.abc import Mapping
from typing import Any

from fuel_finder.domain.models import (
    Coordinates,
    LocationDeniedError,
    LocationError,
    LocationTimeoutError,
    LocationUnavailableError,
    LocationUnsupportedError,
)
from fuel_finder.domain.ports.location_provider import LocationProvider

_FAILURES: dict[str, type[LocationError]] = {
    "unsupported": LocationUnsupportedError,
    "1": LocationDeniedError,
    "denied": LocationDeniedError,
    "2": LocationUnavailableError,
    "3": LocationTimeoutError,
    "timeout": LocationTimeoutError,
}


def _first(value: Any) -> Any:
    # Form-encoded payloads carry lists of values
    if isinstance(value, list):
        return value[0] if value else None
    return value


class BrowserLocationProvider(LocationProvider):
    """One-shot provider replaying what the browser reported."""

    def __init__(
        self, location: Coordinates | None = None, error: LocationError | None = None
    ) -> None:
        if (location is None) == (error is None):
            raise ValueError("exactly one of location or error must be given")
        self._location = location
        self._error = error

    @classmethod
    def from_event(cls, event: str, payload: Mapping[str, Any]) -> "BrowserLocationProvider":
        """Build from a ``located`` or ``locate_failed`` page event."""
        if event == "located":
            try:
                location = Coordinates(
                    latitude=float(_first(payload.get("lat"))),
                    longitude=float(_first(payload.get("lon"))),
                )
            except (TypeError, ValueError):
                return cls(error=LocationUnavailableError("Browser reported no usable position"))
            return cls(location=location)

        code = str(_first(payload.get("code")) or "").lower()
        error_class = _FAILURES.get(code, LocationUnavailableError)
        message = str(_first(payload.get("message")) or f"Browser location failed ({code})")
        return cls(error=error_class(message))

    async def current_location(self) -> Coordinates:
        if self._error is not None:
            raise self._error
        return self._location  # type: ignore[return-value]
