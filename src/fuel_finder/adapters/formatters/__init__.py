"""Display formatters."""

from fuel_finder.adapters.formatters.station_formatter import StationFormatter

__all__ = ["StationFormatter"]
