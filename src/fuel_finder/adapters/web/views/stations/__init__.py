"""Stations LiveView."""

from fuel_finder.adapters.web.views.stations.stations import (
    StationsLiveView,
    create_stations_live_view,
)

__all__ = ["StationsLiveView", "create_stations_live_view"]
