"""Stations LiveView state dataclass."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class StationsState:
    """View model of one browser session, written by the LiveView surfaces."""

    query: str = ""
    # Map surface
    markers: list[dict[str, Any]] = field(default_factory=list)
    map_center: tuple[float, float] = (0.0, 0.0)
    map_zoom: int = 2
    user_location: tuple[float, float] | None = None
    open_popup_id: str | None = None
    # Incremented on every map change so the client hook redraws once per change
    map_version: int = 0
    # List surface
    stations: list[dict[str, Any]] = field(default_factory=list)
    nearest: dict[str, Any] | None = None
    loading: bool = False
    message: str = ""
    message_kind: str = ""
    # Filter
    highway_options: list[str] = field(default_factory=list)
    highway_filter: str = ""
