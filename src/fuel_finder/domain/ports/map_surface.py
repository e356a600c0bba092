"""Map rendering surface port."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from fuel_finder.domain.models.geo import Coordinates
from fuel_finder.domain.models.station import Station


class MapSurface(ABC):
    """Port for an interactive map showing station markers."""

    @abstractmethod
    def replace_markers(self, stations: Sequence[Station]) -> None:
        """Show exactly one marker per given station, removing all others."""
        ...

    @abstractmethod
    def set_view(self, center: Coordinates, zoom: int) -> None:
        """Move the viewport."""
        ...

    @abstractmethod
    def show_user_marker(self, location: Coordinates) -> None:
        """Show (or move) the marker for the user's own position."""
        ...

    @abstractmethod
    def open_popup(self, station_id: str) -> None:
        """Open the popup bound to a station marker."""
        ...
