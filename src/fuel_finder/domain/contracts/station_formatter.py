"""Protocol for formatting stations for display."""

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from fuel_finder.domain.models.station import Station


class StationFormatterProtocol(Protocol):
    """Protocol for turning stations into display-ready values."""

    def format_distance(self, station: "Station") -> str:
        """Format the distance of a station, or an empty string when unknown."""
        ...

    def format_popup(self, station: "Station") -> list[str]:
        """Format the lines of a map marker popup."""
        ...

    def format_list_item(self, station: "Station", is_nearest: bool = False) -> dict[str, Any]:
        """Format a station as a list entry."""
        ...
