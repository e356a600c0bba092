"""Console rendering surfaces for the CLI."""

from fuel_finder.adapters.console.console_surfaces import ConsoleListSurface, ConsoleMapSurface

__all__ = ["ConsoleListSurface", "ConsoleMapSurface"]
