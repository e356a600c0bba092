"""Application services (use cases) for the fuel finder."""

from fuel_finder.application.services.presentation_coordinator import PresentationCoordinator
from fuel_finder.application.services.station_search_service import StationSearchService

__all__ = ["PresentationCoordinator", "StationSearchService"]
