"""Location provider port."""

from typing import Protocol

from fuel_finder.domain.models.geo import Coordinates


class LocationProvider(Protocol):
    """Port for the device location capability (single-shot, no watching)."""

    async def current_location(self) -> Coordinates:
        """Return the current position.

        Raises:
            LocationError: One of its subclasses, classifying the failure.
        """
        ...
