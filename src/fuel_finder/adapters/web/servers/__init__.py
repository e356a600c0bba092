"""Servers for static web assets."""

from fuel_finder.adapters.web.servers.static_file_server import (
    StaticFileServer,
    find_static_directory,
)

__all__ = ["StaticFileServer", "find_static_directory"]
