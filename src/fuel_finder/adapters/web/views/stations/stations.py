"""Stations LiveView: search, filter and locate fuel stations in the browser."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pyview import LiveView, LiveViewSocket
from pyview.events import InfoEvent
from pyview.template.live_template import LiveRender, LiveTemplate
from pyview.vendor import ibis

from fuel_finder.adapters.config import AppConfig
from fuel_finder.adapters.formatters import StationFormatter
from fuel_finder.adapters.location import BrowserLocationProvider
from fuel_finder.adapters.web.builders import build_template_assigns
from fuel_finder.adapters.web.state import StationsState
from fuel_finder.adapters.web.surfaces import LiveViewListSurface, LiveViewMapSurface
from fuel_finder.domain.models.finder_state import PHASE_LOADING
from fuel_finder.domain.ports import (
    CoordinatorFactory,
    FinderCoordinator,  # noqa: TC001 - Runtime dependency: methods called at runtime
)

logger = logging.getLogger(__name__)

TEMPLATE_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "stations.html")

# Events whose coordinator action runs after the loading state is rendered
DEFERRED_EVENTS = ("search", "located", "locate_failed")
RUN_ACTION = "run_action"


def payload_value(payload: Mapping[str, Any] | None, key: str) -> str:
    """Read a single string value from an event payload.

    Form events deliver lists of values, hook events plain values.
    """
    if not payload:
        return ""
    value = payload.get(key)
    if isinstance(value, list):
        value = value[0] if value else ""
    return "" if value is None else str(value)


class StationsLiveView(LiveView[StationsState]):
    """LiveView hosting one presentation coordinator per connected browser."""

    _template: ibis.Template | None = None

    def __init__(self, coordinator_factory: CoordinatorFactory, config: AppConfig) -> None:
        """Initialize the LiveView.

        Args:
            coordinator_factory: Builds a coordinator bound to a session's surfaces.
            config: Application configuration.
        """
        super().__init__()
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(coordinator_factory):
            raise TypeError("coordinator_factory must be callable")
        self.coordinator_factory = coordinator_factory
        self.config = config
        self.formatter = StationFormatter()
        self.coordinators: dict[LiveViewSocket[StationsState], FinderCoordinator] = {}

    def create_session(self) -> tuple[StationsState, FinderCoordinator]:
        """Create the view state and coordinator for a new browser session."""
        state = StationsState(
            map_center=(self.config.map_center_latitude, self.config.map_center_longitude),
            map_zoom=self.config.map_zoom,
            highway_options=list(self.config.highways),
        )
        coordinator = self.coordinator_factory(
            LiveViewMapSurface(state, self.formatter),
            LiveViewListSurface(state, self.formatter),
        )
        return state, coordinator

    async def mount(self, socket: LiveViewSocket[StationsState], _session: dict) -> None:
        """Mount the LiveView with a fresh session."""
        state, coordinator = self.create_session()
        socket.context = state
        self.coordinators[socket] = coordinator
        logger.debug(f"Mounted stations view ({len(self.coordinators)} active session(s))")

    async def unmount(self, socket: LiveViewSocket[StationsState]) -> None:
        """Drop the session of an unmounted socket."""
        self.coordinators.pop(socket, None)

    async def disconnect(self, socket: LiveViewSocket[StationsState]) -> None:
        """Drop the session of a disconnected socket."""
        self.coordinators.pop(socket, None)

    async def handle_event(
        self, event: str, payload: Any, socket: LiveViewSocket[StationsState]
    ) -> None:
        """Dispatch page events to the coordinator.

        Searches and location results are slow, so the loading state is
        rendered first and the action runs from ``handle_info`` afterwards.
        """
        coordinator = self.coordinator_for(socket)
        state = socket.context

        if event == "locate_started":
            state.loading = True
            return

        if event in DEFERRED_EVENTS:
            self.begin_event(state, event, payload)
            socket.schedule_info_once(
                InfoEvent(RUN_ACTION, {"event": event, "payload": payload or {}})
            )
            return

        await self.dispatch_event(coordinator, state, event, payload)

    async def handle_info(
        self, event: str | InfoEvent, socket: LiveViewSocket[StationsState]
    ) -> None:
        """Run an action deferred by ``handle_event``."""
        if not isinstance(event, InfoEvent) or event.name != RUN_ACTION:
            logger.warning(f"Unexpected info event: {event!r}")
            return

        payload = event.payload or {}
        await self.dispatch_event(
            self.coordinator_for(socket),
            socket.context,
            str(payload.get("event", "")),
            payload.get("payload"),
        )

    def coordinator_for(self, socket: LiveViewSocket[StationsState]) -> FinderCoordinator:
        """Coordinator of a socket's session, created on first use."""
        coordinator = self.coordinators.get(socket)
        if coordinator is None:
            state, coordinator = self.create_session()
            socket.context = state
            self.coordinators[socket] = coordinator
        return coordinator

    @staticmethod
    def begin_event(state: StationsState, event: str, payload: Any) -> None:
        """Show the loading state for an action about to run."""
        if event == "search":
            state.query = payload_value(payload, "city")
            if not state.query.strip():
                return
        state.loading = True

    async def dispatch_event(
        self,
        coordinator: FinderCoordinator,
        state: StationsState,
        event: str,
        payload: Any,
    ) -> None:
        """Run the coordinator action for an event and sync filter state."""
        if event == "search":
            state.query = payload_value(payload, "city")
            await coordinator.search_city(state.query)
        elif event == "filter":
            coordinator.filter_by_highway(payload_value(payload, "highway"))
        elif event in ("located", "locate_failed"):
            provider = BrowserLocationProvider.from_event(event, payload or {})
            await coordinator.locate_me(provider)
        else:
            logger.warning(f"Unknown event '{event}' with payload {payload!r}")
            return

        state.loading = coordinator.state.phase == PHASE_LOADING
        state.highway_options = coordinator.highway_options()
        state.highway_filter = coordinator.state.highway_filter

    @classmethod
    def load_template(cls) -> ibis.Template:
        """Load and cache the page template."""
        if cls._template is None:
            with open(TEMPLATE_FILE, encoding="utf-8") as f:
                cls._template = ibis.Template(f.read())
        return cls._template

    async def render(self, assigns: StationsState, meta: Any) -> Any:
        """Render the HTML template."""
        state = assigns if isinstance(assigns, StationsState) else StationsState()
        live_template = LiveTemplate(self.load_template())
        return LiveRender(live_template, build_template_assigns(state, self.config), meta)


def create_stations_live_view(
    coordinator_factory: CoordinatorFactory, config: AppConfig
) -> type[StationsLiveView]:
    """Create a configured StationsLiveView class.

    PyView's add_live_view expects a class, not an instance, so the
    dependencies are captured in a subclass.
    """
    captured_factory = coordinator_factory
    captured_config = config

    class ConfiguredStationsLiveView(StationsLiveView):
        """Configured stations LiveView."""

        def __init__(self) -> None:
            super().__init__(captured_factory, captured_config)

    return ConfiguredStationsLiveView
