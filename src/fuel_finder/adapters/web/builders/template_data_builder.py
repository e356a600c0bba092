"""Builder for stations template assigns."""

import json
from typing import Any

from fuel_finder.adapters.config import AppConfig
from fuel_finder.adapters.web.state import StationsState

EMPTY_LIST_TEXT = "No stations found for this area. Try another search."

# JSON escapes that keep the payload inert inside a single-quoted HTML attribute
_ATTRIBUTE_SAFE_JSON = str.maketrans(
    {"<": "\\u003c", ">": "\\u003e", "&": "\\u0026", "'": "\\u0027"}
)


def build_map_payload(state: StationsState, config: AppConfig) -> dict[str, Any]:
    """Data the client-side map hook needs to redraw."""
    return {
        "version": state.map_version,
        "center": list(state.map_center),
        "zoom": state.map_zoom,
        "markers": state.markers,
        "user": list(state.user_location) if state.user_location else None,
        "openPopup": state.open_popup_id,
        "tileUrl": config.tile_url,
    }


def map_json(state: StationsState, config: AppConfig) -> str:
    """Serialize the map payload for the map element's data attribute."""
    payload = json.dumps(build_map_payload(state, config), separators=(",", ":"))
    return payload.translate(_ATTRIBUTE_SAFE_JSON)


def _station_assigns(item: dict[str, Any]) -> dict[str, Any]:
    return {
        "id": str(item["id"]),
        "name": str(item["name"]),
        "highway": str(item["highway"]),
        "address": str(item["address"]),
        "hours": str(item["hours"]),
        "services": [str(s) for s in item["services"]],
        "distance": str(item["distance"]),
        "css_class": "station-item nearest" if item["is_nearest"] else "station-item",
    }


def build_template_assigns(state: StationsState, config: AppConfig) -> dict[str, Any]:
    """Build template variables; every leaf value is a string, list or bool, never None."""
    return {
        "title": str(config.title),
        "query": state.query,
        "loading_class": "" if state.loading else "hidden",
        "message": state.message,
        "message_kind": state.message_kind or "info",
        "has_message": bool(state.message),
        "map_json": map_json(state, config),
        "location_timeout_ms": str(int(config.location_timeout_seconds * 1000)),
        "location_max_age_ms": str(int(config.location_max_age_seconds * 1000)),
        "highway_options": [
            {"value": option, "selected": "selected" if option == state.highway_filter else ""}
            for option in state.highway_options
        ],
        "has_nearest": state.nearest is not None,
        "nearest": _station_assigns(state.nearest) if state.nearest is not None else {},
        "has_stations": bool(state.stations),
        "stations": [_station_assigns(item) for item in state.stations],
        "station_count": str(len(state.stations)),
        "empty_text": EMPTY_LIST_TEXT,
    }
