"""LiveView implementations of the map and list rendering surfaces.

Both surfaces write into the session's StationsState; the LiveView renders it
after each event. The map itself is drawn client-side by Leaflet from the
serialized marker data.
"""

from collections.abc import Sequence

from fuel_finder.adapters.formatters import StationFormatter
from fuel_finder.adapters.web.state import StationsState
from fuel_finder.domain.models import Coordinates, FinderMessage, Station
from fuel_finder.domain.ports import ListSurface, MapSurface


class LiveViewMapSurface(MapSurface):
    """Map surface backed by the LiveView state."""

    def __init__(self, state: StationsState, formatter: StationFormatter) -> None:
        self.state = state
        self.formatter = formatter

    def replace_markers(self, stations: Sequence[Station]) -> None:
        self.state.markers = [
            {
                "id": s.id,
                "lat": s.latitude,
                "lon": s.longitude,
                "popup": self.formatter.format_popup(s),
            }
            for s in stations
        ]
        self.state.open_popup_id = None
        self.state.map_version += 1

    def set_view(self, center: Coordinates, zoom: int) -> None:
        self.state.map_center = (center.latitude, center.longitude)
        self.state.map_zoom = zoom
        self.state.map_version += 1

    def show_user_marker(self, location: Coordinates) -> None:
        self.state.user_location = (location.latitude, location.longitude)
        self.state.map_version += 1

    def open_popup(self, station_id: str) -> None:
        if any(marker["id"] == station_id for marker in self.state.markers):
            self.state.open_popup_id = station_id
            self.state.map_version += 1


class LiveViewListSurface(ListSurface):
    """List surface backed by the LiveView state."""

    def __init__(self, state: StationsState, formatter: StationFormatter) -> None:
        self.state = state
        self.formatter = formatter

    def render_stations(self, stations: Sequence[Station], nearest: Station | None) -> None:
        nearest_id = nearest.id if nearest is not None else None
        self.state.stations = [
            self.formatter.format_list_item(s, is_nearest=s.id == nearest_id) for s in stations
        ]
        self.state.nearest = (
            self.formatter.format_list_item(nearest, is_nearest=True)
            if nearest is not None
            else None
        )

    def set_loading(self, visible: bool) -> None:
        self.state.loading = visible

    def show_message(self, message: FinderMessage | None) -> None:
        self.state.message = self.formatter.format_message(message)
        self.state.message_kind = message.kind if message is not None else ""
