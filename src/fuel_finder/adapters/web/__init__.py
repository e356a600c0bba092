"""Web adapter serving the fuel finder page."""

from fuel_finder.adapters.web.pyview_app import PyViewWebAdapter

__all__ = ["PyViewWebAdapter"]
