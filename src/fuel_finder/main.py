"""Main entry point for the fuel finder web application."""

import asyncio
import logging
import sys

from fuel_finder.adapters.config import AppConfig
from fuel_finder.adapters.web import PyViewWebAdapter
from fuel_finder.bootstrap import (
    create_coordinator_factory,
    create_search_service,
    create_session,
)

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = AppConfig()
    try:
        config.apply_toml()
    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)
    logger.info(
        f"Search radius starts at {config.initial_search_radius_meters} m, "
        f"up to {config.max_radius_attempts} attempt(s)"
    )
    if config.highways:
        logger.info(f"Highway filter options: {', '.join(config.highways)}")

    # One aiohttp session for all outgoing requests
    async with create_session(config) as session:
        search_service = create_search_service(config, session)
        display_adapter = PyViewWebAdapter(
            create_coordinator_factory(config, search_service), config
        )

        try:
            await display_adapter.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await display_adapter.stop()


def run() -> None:
    """Synchronous entry point for the web server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
