"""PyView web adapter hosting the fuel finder page."""

from __future__ import annotations

import logging
from typing import Any

from fuel_finder.adapters.config import AppConfig
from fuel_finder.domain.ports import CoordinatorFactory, DisplayAdapter

from .servers import StaticFileServer
from .views.stations import create_stations_live_view

logger = logging.getLogger(__name__)

LEAFLET_VERSION = "1.9.4"
LEAFLET_CSS_URL = f"https://unpkg.com/leaflet@{LEAFLET_VERSION}/dist/leaflet.css"
LEAFLET_JS_URL = f"https://unpkg.com/leaflet@{LEAFLET_VERSION}/dist/leaflet.js"


def build_head_content() -> str:
    """Markup placed in the page head: favicon, Leaflet and the map hooks."""
    return "\n".join(
        [
            '<link rel="icon" href="/favicon.svg" type="image/svg+xml">',
            f'<link rel="stylesheet" href="{LEAFLET_CSS_URL}" crossorigin="">',
            '<link rel="stylesheet" href="/static/fuel_finder.css">',
            f'<script src="{LEAFLET_JS_URL}" crossorigin=""></script>',
            '<script src="/static/fuel_finder.js"></script>',
        ]
    )


class PyViewWebAdapter(DisplayAdapter):
    """PyView-based web adapter; one coordinator per browser session."""

    def __init__(self, coordinator_factory: CoordinatorFactory, config: AppConfig) -> None:
        """Initialize the web adapter.

        Args:
            coordinator_factory: Builds a coordinator for a session's map and list surfaces.
            config: Application configuration.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        if not callable(coordinator_factory):
            raise TypeError("coordinator_factory must be callable")

        self.coordinator_factory = coordinator_factory
        self.config = config
        self._server: Any | None = None

    def create_app(self) -> Any:
        """Build the PyView application with all routes registered."""
        from markupsafe import Markup
        from pyview import PyView
        from pyview.playground.favicon import generate_favicon_svg
        from pyview.template import defaultRootTemplate
        from starlette.responses import Response
        from starlette.routing import Route

        app = PyView()

        favicon_svg = generate_favicon_svg(
            self.config.title, bg_color="#1B7F3B", text_color="#FFFFFF"
        )

        async def favicon(_request: Any) -> Response:
            response = Response(content=favicon_svg, media_type="image/svg+xml")
            response.headers["Cache-Control"] = "public, max-age=60, must-revalidate"
            return response

        app.routes.append(Route("/favicon.svg", favicon, methods=["GET"]))

        app.rootTemplate = defaultRootTemplate(
            title=self.config.title,
            title_suffix="",
            css=Markup(build_head_content()),
        )

        live_view_class = create_stations_live_view(self.coordinator_factory, self.config)
        app.add_live_view("/", live_view_class)
        logger.info("Registered stations view at '/'")

        async def healthz(_request: Any) -> Response:
            """Health check endpoint for load balancers and monitoring."""
            return Response(content="Ok", media_type="text/plain")

        app.routes.append(Route("/healthz", healthz, methods=["GET"]))

        StaticFileServer().register_routes(app)
        return app

    async def start(self) -> None:
        """Start the web server."""
        import uvicorn

        app = self.create_app()
        server_config = uvicorn.Config(
            app,
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(server_config)
        logger.info(f"Serving {self.config.title} on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Stop the web server."""
        if self._server:
            self._server.should_exit = True
