"""Wiring of the HTTP session, adapters and services shared by the entry points."""

import aiohttp

from fuel_finder.adapters.config import AppConfig
from fuel_finder.adapters.nominatim_api import NominatimGeocoder
from fuel_finder.adapters.overpass_api import OverpassStationRepository
from fuel_finder.application.services import PresentationCoordinator, StationSearchService
from fuel_finder.domain.ports import CoordinatorFactory, ListSurface, MapSurface


def create_session(config: AppConfig) -> aiohttp.ClientSession:
    """Create the shared HTTP session; no timeout unless one is configured."""
    if config.http_timeout_seconds is None:
        return aiohttp.ClientSession()
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=config.http_timeout_seconds))


def create_search_service(
    config: AppConfig, session: aiohttp.ClientSession
) -> StationSearchService:
    """Wire the geocoder and station repository into the search service."""
    geocoder = NominatimGeocoder(
        session, base_url=config.nominatim_url, user_agent=config.user_agent
    )
    station_repo = OverpassStationRepository(
        session, base_url=config.overpass_url, user_agent=config.user_agent
    )
    return StationSearchService(
        geocoder,
        station_repo,
        initial_radius_meters=config.initial_search_radius_meters,
        max_radius_attempts=config.max_radius_attempts,
    )


def create_coordinator_factory(
    config: AppConfig, search_service: StationSearchService
) -> CoordinatorFactory:
    """Build coordinators that share the search service but not their state.

    Web sessions pass the browser's position with each locate action, so no
    default location provider is bound here.
    """

    def factory(map_surface: MapSurface, list_surface: ListSurface) -> PresentationCoordinator:
        return PresentationCoordinator(
            search_service,
            map_surface,
            list_surface,
            configured_highways=config.highways,
            station_zoom=config.station_zoom,
            user_zoom=config.user_zoom,
        )

    return factory
