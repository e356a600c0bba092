"""Formatter for station display values."""

from typing import Any

from fuel_finder.domain.contracts.station_formatter import StationFormatterProtocol
from fuel_finder.domain.models import FinderMessage, Station


class StationFormatter(StationFormatterProtocol):
    """Turns stations into strings and dicts for the console and the web page."""

    def __init__(self, distance_decimals: int = 1) -> None:
        self.distance_decimals = distance_decimals

    def format_distance(self, station: Station) -> str:
        """Format distance as e.g. '3.4 km away'; empty when the distance is unknown."""
        if station.distance_km is None:
            return ""
        return f"{station.distance_km:.{self.distance_decimals}f} km away"

    def format_services(self, station: Station) -> str:
        return ", ".join(station.services) if station.services else "No services listed"

    def format_popup(self, station: Station) -> list[str]:
        """Lines of the popup bound to a station marker."""
        lines = [station.name, station.highway_tag, station.address, f"Hours: {station.hours}"]
        distance = self.format_distance(station)
        if distance:
            lines.append(distance)
        return lines

    def format_list_item(self, station: Station, is_nearest: bool = False) -> dict[str, Any]:
        """Format a station as a list entry; all values are display-ready."""
        return {
            "id": station.id,
            "name": station.name,
            "highway": station.highway_tag,
            "address": station.address,
            "hours": station.hours,
            "services": list(station.services),
            "distance": self.format_distance(station),
            "is_nearest": is_nearest,
            "latitude": station.latitude,
            "longitude": station.longitude,
        }

    def format_message(self, message: FinderMessage | None) -> str:
        return message.text if message is not None else ""
