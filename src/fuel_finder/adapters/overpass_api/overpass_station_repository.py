"""Overpass station repository adapter.

Queries OpenStreetMap `amenity=fuel` nodes through the Overpass API.
API Documentation: https://wiki.openstreetmap.org/wiki/Overpass_API
"""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from fuel_finder.adapters.api_request_logger import log_api_request
from fuel_finder.adapters.overpass_api.element_parser import ElementParser
from fuel_finder.adapters.overpass_api.query_builder import (
    OVERPASS_INTERPRETER_URL,
    bounding_box_query,
    radius_query,
)
from fuel_finder.domain.models import (
    BoundingBox,
    Coordinates,
    ErrorDetails,
    PoiTransportError,
    Station,
)
from fuel_finder.domain.ports.station_repository import StationRepository

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class OverpassStationRepository(StationRepository):
    """Adapter for fuel stations using the Overpass API."""

    def __init__(
        self,
        session: "ClientSession",
        base_url: str = OVERPASS_INTERPRETER_URL,
        user_agent: str = "fuel-finder",
    ) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            base_url: Overpass interpreter endpoint.
            user_agent: User-Agent header sent with each query.
        """
        self._session = session
        self._base_url = base_url
        self._headers = {"accept": "application/json", "user-agent": user_agent}
        self._parser = ElementParser()

    async def find_stations_in_bounding_box(self, box: BoundingBox) -> list[Station]:
        """Find fuel stations inside a bounding box.

        Raises:
            PoiTransportError: If the query fails.
        """
        return await self._run_query(bounding_box_query(box))

    async def find_stations_near_point(
        self, center: Coordinates, radius_meters: int
    ) -> list[Station]:
        """Find fuel stations within ``radius_meters`` of ``center``.

        Raises:
            PoiTransportError: If the query fails.
        """
        return await self._run_query(radius_query(center, radius_meters))

    async def _run_query(self, query: str) -> list[Station]:
        params = {"data": query}
        log_api_request("overpass", self._base_url, params=params, headers=self._headers)

        try:
            async with self._session.get(
                self._base_url, params=params, headers=self._headers
            ) as response:
                elements = await self._read_elements(response, query)
        except (aiohttp.ClientError, TimeoutError, ValueError) as e:
            logger.warning(f"Error running Overpass query {query}: {e}")
            raise PoiTransportError(
                "Station query failed", ErrorDetails(reason=str(e) or type(e).__name__)
            ) from e

        stations = self._parser.parse_elements(elements)
        logger.debug(f"Overpass returned {len(elements)} element(s), {len(stations)} usable")
        return stations

    async def _read_elements(self, response: "ClientResponse", query: str) -> list[Any]:
        """Read the `elements` array from an Overpass response."""
        if response.status != 200:
            response_text = await response.text()
            logger.warning(
                f"Overpass returned status {response.status} for {query}: {response_text[:200]}"
            )
            raise PoiTransportError(
                f"Station query returned status {response.status}",
                ErrorDetails(status_code=response.status, reason=response.reason or "HTTP error"),
            )

        data = await response.json(content_type=None)
        elements = data.get("elements") if isinstance(data, dict) else None
        if not isinstance(elements, list):
            raise ValueError("response has no 'elements' array")
        return elements
