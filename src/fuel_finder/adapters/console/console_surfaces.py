"""Console implementations of the map and list rendering surfaces."""

import sys
from collections.abc import Sequence
from typing import TextIO

from fuel_finder.adapters.formatters import StationFormatter
from fuel_finder.domain.models import Coordinates, FinderMessage, Station
from fuel_finder.domain.ports import ListSurface, MapSurface


class ConsoleMapSurface(MapSurface):
    """Keeps the map state in memory and reports viewport changes as text."""

    def __init__(
        self, formatter: StationFormatter | None = None, stream: TextIO | None = None
    ) -> None:
        self.formatter = formatter or StationFormatter()
        self.stream = stream or sys.stderr
        self.markers: dict[str, list[str]] = {}  # station_id -> popup lines
        self.center: Coordinates | None = None
        self.zoom: int | None = None
        self.user_location: Coordinates | None = None
        self.open_popup_id: str | None = None

    def replace_markers(self, stations: Sequence[Station]) -> None:
        self.markers = {s.id: self.formatter.format_popup(s) for s in stations}
        self.open_popup_id = None

    def set_view(self, center: Coordinates, zoom: int) -> None:
        self.center = center
        self.zoom = zoom
        print(
            f"Map: {len(self.markers)} marker(s), centered on "
            f"{center.latitude:.4f}, {center.longitude:.4f} (zoom {zoom})",
            file=self.stream,
        )

    def show_user_marker(self, location: Coordinates) -> None:
        self.user_location = location
        print(
            f"You are here: {location.latitude:.4f}, {location.longitude:.4f}", file=self.stream
        )

    def open_popup(self, station_id: str) -> None:
        if station_id in self.markers:
            self.open_popup_id = station_id


class ConsoleListSurface(ListSurface):
    """Prints the station list, status messages and a loading line."""

    EMPTY_LIST_TEXT = "No stations found for this area. Try another search."

    def __init__(
        self,
        formatter: StationFormatter | None = None,
        stream: TextIO | None = None,
        status_stream: TextIO | None = None,
    ) -> None:
        self.formatter = formatter or StationFormatter()
        self.stream = stream or sys.stdout
        self.status_stream = status_stream or sys.stderr
        self.loading = False
        self.last_rendered: list[Station] = []

    def render_stations(self, stations: Sequence[Station], nearest: Station | None) -> None:
        self.last_rendered = list(stations)
        if nearest is not None:
            print("Nearest station:", file=self.stream)
            self._print_station(nearest, indent="  ")
            print(file=self.stream)
        if not stations:
            print(self.EMPTY_LIST_TEXT, file=self.stream)
            return
        print(f"{len(stations)} station(s):", file=self.stream)
        for station in stations:
            self._print_station(station, indent="  ")

    def set_loading(self, visible: bool) -> None:
        if visible and not self.loading:
            print("Loading...", file=self.status_stream)
        self.loading = visible

    def show_message(self, message: FinderMessage | None) -> None:
        if message is not None:
            print(message.text, file=self.status_stream)

    def _print_station(self, station: Station, indent: str) -> None:
        distance = self.formatter.format_distance(station)
        title = f"{station.name} ({distance})" if distance else station.name
        print(f"{indent}{title}", file=self.stream)
        print(f"{indent}  Highway:  {station.highway_tag}", file=self.stream)
        print(f"{indent}  Address:  {station.address}", file=self.stream)
        print(f"{indent}  Hours:    {station.hours}", file=self.stream)
        print(f"{indent}  Services: {self.formatter.format_services(station)}", file=self.stream)
