"""Distance computation, ranking and filtering of stations."""

import math
from collections.abc import Iterable, Sequence

from fuel_finder.domain.models import Coordinates, Station

EARTH_RADIUS_KM = 6371.0

# Filter values that mean "show every station"
ALL_HIGHWAYS = ("", "all")


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great-circle distance between two points on Earth.

    Args:
        lat1: Latitude of first point (degrees)
        lon1: Longitude of first point (degrees)
        lat2: Latitude of second point (degrees)
        lon2: Longitude of second point (degrees)

    Returns:
        Distance in kilometers
    """
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_KM * c


def distance_between(origin: Coordinates, target: Coordinates) -> float:
    """Haversine distance in kilometers between two coordinates."""
    return haversine(origin.latitude, origin.longitude, target.latitude, target.longitude)


def with_distances(stations: Iterable[Station], origin: Coordinates) -> tuple[Station, ...]:
    """Return copies of the stations with distances measured from ``origin``."""
    return tuple(
        station.with_distance(distance_between(origin, station.coordinates))
        for station in stations
    )


def find_nearest(stations: Iterable[Station]) -> Station | None:
    """Return the station with the smallest known distance.

    Ties keep the first station in sequence order.
    """
    nearest: Station | None = None
    for station in stations:
        if station.distance_km is None:
            continue
        if nearest is None or station.distance_km < nearest.distance_km:  # type: ignore[operator]
            nearest = station
    return nearest


def sort_by_distance(stations: Iterable[Station]) -> list[Station]:
    """Sort ascending by distance, stable for equal distances.

    A station without a distance sorts as if it were 0 km away.
    """
    return sorted(stations, key=lambda s: s.distance_km or 0.0)


def is_all_highways(highway: str | None) -> bool:
    """Check whether a filter value means "no filter"."""
    return highway is None or highway.strip().lower() in ALL_HIGHWAYS


def filter_by_highway(stations: Iterable[Station], highway: str | None) -> list[Station]:
    """Keep only stations tagged with the given highway; the "all" value keeps everything."""
    if is_all_highways(highway):
        return list(stations)
    wanted = highway.strip()  # type: ignore[union-attr]
    return [s for s in stations if s.highway_tag == wanted]


def displayed_stations(
    stations: Sequence[Station], highway: str | None, sort_by_reference: bool
) -> list[Station]:
    """Compute the stations to show: filtered, then distance-sorted when a reference exists."""
    shown = filter_by_highway(stations, highway)
    if sort_by_reference:
        return sort_by_distance(shown)
    return shown
