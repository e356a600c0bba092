"""Approximate device location from the public IP address.

Uses the ip-api.com JSON endpoint.
API Documentation: https://ip-api.com/docs/api:json
"""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from fuel_finder.adapters.api_request_logger import log_api_request
from fuel_finder.domain.models import (
    Coordinates,
    ErrorDetails,
    LocationDeniedError,
    LocationUnavailableError,
)
from fuel_finder.domain.ports.location_provider import LocationProvider

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientSession

IP_LOCATION_URL = "http://ip-api.com/json/"


class IpLocationProvider(LocationProvider):
    """Location provider backed by an IP geolocation service."""

    def __init__(self, session: "ClientSession", url: str = IP_LOCATION_URL) -> None:
        """Initialize with an aiohttp session.

        Args:
            session: aiohttp ClientSession for HTTP requests.
            url: IP geolocation endpoint.
        """
        self._session = session
        self._url = url

    async def current_location(self) -> Coordinates:
        """Look up the position of the current public IP.

        Raises:
            LocationDeniedError: If the service refuses the request (403/429).
            LocationUnavailableError: For any other failure.
        """
        params = {"fields": "status,message,lat,lon"}
        log_api_request("ip-location", self._url, params=params)

        try:
            async with self._session.get(self._url, params=params) as response:
                if response.status in (403, 429):
                    raise LocationDeniedError(
                        f"IP location service refused the request ({response.status})",
                        ErrorDetails(status_code=response.status, reason="refused"),
                    )
                if response.status != 200:
                    raise LocationUnavailableError(
                        f"IP location service returned status {response.status}",
                        ErrorDetails(status_code=response.status, reason="HTTP error"),
                    )
                data = await response.json(content_type=None)
        except (aiohttp.ClientError, ValueError) as e:
            logger.warning(f"Error requesting IP location: {e}")
            raise LocationUnavailableError(
                "IP location request failed", ErrorDetails(reason=str(e) or type(e).__name__)
            ) from e

        return self._parse_location(data)

    @staticmethod
    def _parse_location(data: Any) -> Coordinates:
        if not isinstance(data, dict) or data.get("status") != "success":
            reason = data.get("message", "unknown") if isinstance(data, dict) else "bad response"
            logger.warning(f"IP location lookup failed: {reason}")
            raise LocationUnavailableError(
                f"IP location lookup failed: {reason}", ErrorDetails(reason=str(reason))
            )
        try:
            return Coordinates(latitude=float(data["lat"]), longitude=float(data["lon"]))
        except (KeyError, TypeError, ValueError) as e:
            raise LocationUnavailableError(
                "IP location response has no usable coordinates", ErrorDetails(reason=str(e))
            ) from e
