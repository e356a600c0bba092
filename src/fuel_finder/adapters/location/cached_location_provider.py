"""Timeout and position-reuse wrapper around another location provider."""

import asyncio
import logging
import time
from collections.abc import Callable

from fuel_finder.domain.models import Coordinates, LocationTimeoutError
from fuel_finder.domain.ports.location_provider import LocationProvider

logger = logging.getLogger(__name__)

LOCATION_TIMEOUT_SECONDS = 10.0
LOCATION_MAX_AGE_SECONDS = 600.0


class CachedLocationProvider(LocationProvider):
    """Bounds each request by a timeout and reuses a recent position.

    A position obtained less than ``max_age_seconds`` ago is returned without
    asking the wrapped provider again. Failed requests are never cached.
    """

    def __init__(
        self,
        provider: LocationProvider,
        timeout_seconds: float = LOCATION_TIMEOUT_SECONDS,
        max_age_seconds: float = LOCATION_MAX_AGE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the wrapper.

        Args:
            provider: The provider doing the actual lookup.
            timeout_seconds: Upper bound for a single lookup.
            max_age_seconds: How long a position stays reusable.
            clock: Monotonic clock, replaceable in tests.
        """
        self._provider = provider
        self._timeout_seconds = timeout_seconds
        self._max_age_seconds = max_age_seconds
        self._clock = clock
        self._cached: Coordinates | None = None
        self._cached_at = 0.0

    async def current_location(self) -> Coordinates:
        """Return a cached position if still fresh, otherwise ask the wrapped provider.

        Raises:
            LocationTimeoutError: If the lookup exceeds the timeout.
            LocationError: Whatever the wrapped provider raises.
        """
        now = self._clock()
        if self._cached is not None and now - self._cached_at <= self._max_age_seconds:
            logger.debug(f"Reusing position from {now - self._cached_at:.0f}s ago")
            return self._cached

        try:
            location = await asyncio.wait_for(
                self._provider.current_location(), timeout=self._timeout_seconds
            )
        except TimeoutError as e:
            logger.warning(f"Location request timed out after {self._timeout_seconds}s")
            raise LocationTimeoutError(
                f"Location request timed out after {self._timeout_seconds}s"
            ) from e

        self._cached = location
        self._cached_at = self._clock()
        return location
