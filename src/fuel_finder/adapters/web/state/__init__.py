"""State for the stations LiveView."""

from fuel_finder.adapters.web.state.stations_state import StationsState

__all__ = ["StationsState"]
