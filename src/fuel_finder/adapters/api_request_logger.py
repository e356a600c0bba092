"""Utility for logging outgoing API requests when FUEL_FINDER_LOG_REQUESTS is enabled."""

import json
import logging
import os
from typing import Any

logger = logging.getLogger(__name__)


def should_log_requests() -> bool:
    """Check if request logging is enabled via the FUEL_FINDER_LOG_REQUESTS environment variable."""
    return os.getenv("FUEL_FINDER_LOG_REQUESTS", "").lower() == "true"


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def log_api_request(
    service: str,
    url: str,
    params: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> None:
    """Log a GET request to an external service if request logging is enabled.

    Args:
        service: Short name of the external service (e.g. "nominatim").
        url: Request URL.
        params: Query parameters (optional).
        headers: Request headers (optional).
    """
    if not should_log_requests():
        return

    log_parts = [f"GET {_build_url_with_params(url, params)}"]
    if headers:
        log_parts.append(f"Headers: {json.dumps(headers, indent=2, sort_keys=True)}")

    logger.info(f"{service} request:\n" + "\n".join(log_parts))
