"""Tests for wiring adapters and services together."""

from unittest.mock import MagicMock

import pytest

from fuel_finder.adapters.config import AppConfig
from fuel_finder.application.services import PresentationCoordinator, StationSearchService
from fuel_finder.bootstrap import create_coordinator_factory, create_search_service, create_session


@pytest.fixture
def config() -> AppConfig:
    return AppConfig(config_file=None, _env_file=None)


@pytest.mark.asyncio
async def test_session_has_no_timeout_by_default(config) -> None:
    """Given no HTTP timeout, when creating the session, then requests are unbounded."""
    async with create_session(config) as session:
        assert session.timeout.total is None


@pytest.mark.asyncio
async def test_session_uses_configured_timeout(config) -> None:
    """Given an HTTP timeout, when creating the session, then it bounds the whole request."""
    config.http_timeout_seconds = 12.5

    async with create_session(config) as session:
        assert session.timeout.total == 12.5


def test_search_service_uses_configured_radius(config) -> None:
    """Given radius settings, when wiring the search service, then they drive the sequence."""
    config.initial_search_radius_meters = 1000
    config.max_radius_attempts = 3

    service = create_search_service(config, MagicMock())

    assert isinstance(service, StationSearchService)
    assert service.radius_sequence() == [1000, 2000, 4000]


def test_coordinator_factory_creates_independent_coordinators(config) -> None:
    """Given one factory, when called twice, then each session gets its own state."""
    config.highways = ["NH44"]
    factory = create_coordinator_factory(config, create_search_service(config, MagicMock()))

    first = factory(MagicMock(), MagicMock())
    second = factory(MagicMock(), MagicMock())

    assert isinstance(first, PresentationCoordinator)
    assert first.state is not second.state
    assert first.highway_options() == ["NH44"]
