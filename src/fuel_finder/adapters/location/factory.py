"""Build the configured location provider."""

from typing import TYPE_CHECKING

from fuel_finder.adapters.config import AppConfig
from fuel_finder.adapters.location.cached_location_provider import CachedLocationProvider
from fuel_finder.adapters.location.fixed_location_provider import (
    FixedLocationProvider,
    UnsupportedLocationProvider,
)
from fuel_finder.adapters.location.ip_location_provider import IpLocationProvider

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from fuel_finder.domain.ports import LocationProvider


def create_location_provider(
    config: AppConfig,
    session: "ClientSession",
    latitude: float | None = None,
    longitude: float | None = None,
) -> "LocationProvider":
    """Create the location provider selected by configuration.

    Explicit ``latitude``/``longitude`` take precedence over the configured source.
    """
    if latitude is not None and longitude is not None:
        return FixedLocationProvider(latitude, longitude)

    if config.location_source == "fixed":
        if config.fixed_latitude is None or config.fixed_longitude is None:
            raise ValueError("location_source 'fixed' requires fixed_latitude and fixed_longitude")
        return FixedLocationProvider(config.fixed_latitude, config.fixed_longitude)

    if config.location_source == "ip":
        return CachedLocationProvider(
            IpLocationProvider(session, url=config.ip_location_url),
            timeout_seconds=config.location_timeout_seconds,
            max_age_seconds=config.location_max_age_seconds,
        )

    return UnsupportedLocationProvider()
