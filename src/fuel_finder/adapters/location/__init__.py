"""Device location capability adapters."""

from fuel_finder.adapters.location.browser_location_provider import BrowserLocationProvider
from fuel_finder.adapters.location.cached_location_provider import CachedLocationProvider
from fuel_finder.adapters.location.factory import create_location_provider
from fuel_finder.adapters.location.fixed_location_provider import (
    FixedLocationProvider,
    UnsupportedLocationProvider,
)
from fuel_finder.adapters.location.ip_location_provider import IpLocationProvider

__all__ = [
    "BrowserLocationProvider",
    "CachedLocationProvider",
    "FixedLocationProvider",
    "IpLocationProvider",
    "UnsupportedLocationProvider",
    "create_location_provider",
]
