"""Parser turning Overpass elements into Station domain objects."""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from fuel_finder.domain.models import Coordinates, Station
from fuel_finder.domain.models.station import (
    DEFAULT_ADDRESS,
    DEFAULT_STATION_NAME,
    NOT_APPLICABLE,
)

logger = logging.getLogger(__name__)

# (label, tags any of which must be exactly "yes"), in display order
SERVICE_TAGS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Diesel", ("fuel_diesel",)),
    ("Petrol", ("fuel_petrol", "fuel_octane_95", "fuel_octane_98")),
    ("CNG", ("fuel_cng",)),
    ("LPG", ("fuel_lpg",)),
    ("Electric Vehicle Charging", ("charging_station",)),
    ("ATM", ("atm",)),
    ("Restroom", ("toilets",)),
    ("Car Wash", ("car_wash",)),
)


def derive_services(tags: Mapping[str, Any]) -> tuple[str, ...]:
    """Derive service labels from boolean tags.

    Only the exact string "yes" enables a service. Each label appears at most
    once, in SERVICE_TAGS order.
    """
    return tuple(
        label for label, keys in SERVICE_TAGS if any(tags.get(key) == "yes" for key in keys)
    )


def _tag_or_default(tags: Mapping[str, Any], key: str, default: str) -> str:
    value = tags.get(key)
    if value is None or value == "":
        return default
    return str(value)


def _coordinate(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


class ElementParser:
    """Parser for Overpass `elements` entries."""

    @staticmethod
    def parse_element(element: Mapping[str, Any]) -> Station | None:
        """Parse a single element; returns None when it has no usable position."""
        latitude = _coordinate(element.get("lat"))
        longitude = _coordinate(element.get("lon"))
        if latitude is None or longitude is None:
            logger.debug(f"Dropping element {element.get('id')} without coordinates")
            return None

        tags = element.get("tags")
        if not isinstance(tags, Mapping):
            tags = {}

        return Station(
            id=str(element.get("id", "")),
            coordinates=Coordinates(latitude=latitude, longitude=longitude),
            name=_tag_or_default(tags, "name", DEFAULT_STATION_NAME),
            highway_tag=_tag_or_default(tags, "highway", NOT_APPLICABLE),
            address=_tag_or_default(tags, "addr:full", DEFAULT_ADDRESS),
            hours=_tag_or_default(tags, "opening_hours", NOT_APPLICABLE),
            services=derive_services(tags),
        )

    def parse_elements(self, elements: Iterable[Any]) -> list[Station]:
        """Parse elements in order, skipping malformed ones."""
        stations: list[Station] = []
        for element in elements:
            if not isinstance(element, Mapping):
                logger.debug(f"Skipping non-object element: {element!r}")
                continue
            station = self.parse_element(element)
            if station is not None:
                stations.append(station)
        return stations
