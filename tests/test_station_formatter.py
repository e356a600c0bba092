"""Tests for station display formatting."""

from fuel_finder.adapters.formatters import StationFormatter
from fuel_finder.domain.models import Coordinates, FinderMessage, Station


def make_station(**overrides) -> Station:
    values = {
        "id": "42",
        "coordinates": Coordinates(21.1, 79.0),
        "name": "Highway Fuels",
        "highway_tag": "NH44",
        "address": "Ring Road",
        "hours": "24/7",
        "services": ("Diesel", "ATM"),
    }
    values.update(overrides)
    return Station(**values)


def test_format_distance_one_decimal() -> None:
    """Given a measured station, when formatting, then one decimal and 'km away'."""
    formatter = StationFormatter()

    assert formatter.format_distance(make_station(distance_km=3.456)) == "3.5 km away"


def test_format_distance_unknown_is_empty() -> None:
    """Given an unmeasured station, when formatting distance, then an empty string."""
    assert StationFormatter().format_distance(make_station()) == ""


def test_format_services() -> None:
    """Given services or none, when formatting, then a joined list or a placeholder."""
    formatter = StationFormatter()

    assert formatter.format_services(make_station()) == "Diesel, ATM"
    assert formatter.format_services(make_station(services=())) == "No services listed"


def test_format_popup_lines() -> None:
    """Given a measured station, when building the popup, then distance is the last line."""
    lines = StationFormatter().format_popup(make_station(distance_km=1.0))

    assert lines == ["Highway Fuels", "NH44", "Ring Road", "Hours: 24/7", "1.0 km away"]


def test_format_list_item() -> None:
    """Given a station, when formatting a list item, then all fields are display-ready."""
    item = StationFormatter().format_list_item(make_station(), is_nearest=True)

    assert item["id"] == "42"
    assert item["highway"] == "NH44"
    assert item["services"] == ["Diesel", "ATM"]
    assert item["distance"] == ""
    assert item["is_nearest"] is True
    assert (item["latitude"], item["longitude"]) == (21.1, 79.0)


def test_format_message() -> None:
    """Given a message or none, when formatting, then its text or an empty string."""
    formatter = StationFormatter()

    assert formatter.format_message(FinderMessage(kind="x", text="Hello")) == "Hello"
    assert formatter.format_message(None) == ""
