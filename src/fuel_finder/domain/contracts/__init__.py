"""Protocols shared between the domain and its adapters."""

from fuel_finder.domain.contracts.static_file_server import StaticFileServerProtocol
from fuel_finder.domain.contracts.station_formatter import StationFormatterProtocol

__all__ = ["StaticFileServerProtocol", "StationFormatterProtocol"]
