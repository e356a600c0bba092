"""Nominatim geocoder adapter.

Uses the public OpenStreetMap Nominatim search API.
API Documentation: https://nominatim.org/release-docs/latest/api/Search/
"""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from fuel_finder.adapters.api_request_logger import log_api_request
from fuel_finder.domain.models import (
    BoundingBox,
    Coordinates,
    ErrorDetails,
    GeocodedPlace,
    GeocodeTransportError,
    PlaceNotFoundError,
)
from fuel_finder.domain.ports.geocoder import Geocoder

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession

NOMINATIM_SEARCH_URL = "https://nominatim.openstreetmap.org/search"


class NominatimGeocoder(Geocoder):
    """Adapter resolving place names with Nominatim."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = NOMINATIM_SEARCH_URL,
        user_agent: str = "fuel-finder",
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Nominatim search endpoint.
            user_agent: User-Agent header; Nominatim rejects anonymous clients.
        """
        self._session = session
        self._base_url = base_url
        self._headers = {"accept": "application/json", "user-agent": user_agent}

    async def resolve_place(self, name: str) -> GeocodedPlace:
        """Resolve a place name, taking the first candidate.

        Args:
            name: Free-text place name.

        Returns:
            The geocoded place.

        Raises:
            ValueError: If the name is blank.
            PlaceNotFoundError: If Nominatim returns no candidates.
            GeocodeTransportError: If the request fails or the response is unreadable.
        """
        query = name.strip()
        if not query:
            raise ValueError("place name must not be empty")

        params = {"format": "json", "q": query, "limit": 1}
        log_api_request("nominatim", self._base_url, params=params, headers=self._headers)

        try:
            async with self._session.get(
                self._base_url, params=params, headers=self._headers
            ) as response:
                data = await self._read_response(response, query)
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.warning(f"Error geocoding '{query}': {e}")
            raise GeocodeTransportError(
                f"Geocoding request for '{query}' failed",
                ErrorDetails(reason=str(e) or type(e).__name__),
            ) from e

        if not data:
            logger.info(f"Nominatim has no match for '{query}'")
            raise PlaceNotFoundError(f"No place found for '{query}'")

        return self._parse_place(data[0], query)

    async def _read_response(self, response: "ClientResponse", query: str) -> list[Any]:
        """Read the JSON candidate list from a search response."""
        if response.status != 200:
            response_text = await response.text()
            logger.warning(
                f"Nominatim returned status {response.status} for '{query}': {response_text[:200]}"
            )
            raise GeocodeTransportError(
                f"Geocoding request for '{query}' returned status {response.status}",
                ErrorDetails(status_code=response.status, reason=response.reason or "HTTP error"),
            )

        data = await response.json(content_type=None)
        if not isinstance(data, list):
            raise ValueError(f"expected a JSON array, got {type(data).__name__}")
        return data

    @staticmethod
    def _parse_place(record: Any, query: str) -> GeocodedPlace:
        """Build a GeocodedPlace from a Nominatim search record."""
        try:
            center = Coordinates(latitude=float(record["lat"]), longitude=float(record["lon"]))
            bounding_box = BoundingBox.from_nominatim(record["boundingbox"])
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Malformed Nominatim record for '{query}': {e}")
            raise GeocodeTransportError(
                f"Unreadable geocoding result for '{query}'",
                ErrorDetails(reason=f"malformed record: {e}"),
            ) from e

        return GeocodedPlace(
            query=query,
            display_name=str(record.get("display_name") or query),
            center=center,
            bounding_box=bounding_box,
        )
