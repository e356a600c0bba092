"""Overpass QL queries for fuel stations."""

from fuel_finder.domain.models import BoundingBox, Coordinates

OVERPASS_INTERPRETER_URL = "https://overpass-api.de/api/interpreter"

FUEL_NODE_SELECTOR = 'node["amenity"="fuel"]'


def bounding_box_query(box: BoundingBox) -> str:
    """Query fuel nodes inside a bounding box (south,west,north,east)."""
    return f"[out:json];{FUEL_NODE_SELECTOR}({box.to_overpass()});out;"


def radius_query(center: Coordinates, radius_meters: int) -> str:
    """Query fuel nodes within a radius in meters around a point."""
    if radius_meters <= 0:
        raise ValueError("radius_meters must be positive")
    return (
        f"[out:json];{FUEL_NODE_SELECTOR}"
        f"(around:{radius_meters},{center.latitude},{center.longitude});out;"
    )
