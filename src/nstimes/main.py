"""Main entry point for the NS price HTTP server."""

import asyncio
import logging
import sys

import aiohttp

from nstimes.adapters.ns_api import NsPriceRepository
from nstimes.adapters.web import PriceApi
from nstimes.application.services import PriceService
from nstimes.bootstrap import (
    configure_logging,
    create_price_cache,
    create_station_matcher,
    load_config,
)
from nstimes.domain.errors import PriceCacheError

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    config = load_config()
    configure_logging(config.log_level)

    try:
        api_token = config.require_api_token()
    except ValueError as e:
        logger.error(f"{e}. Set NS_API_TOKEN in the environment or .env file.")
        sys.exit(1)

    try:
        cache = create_price_cache(config.cache_file)
    except PriceCacheError as e:
        logger.error(f"Could not open price cache: {e}")
        sys.exit(1)

    if config.cache_file:
        stats = cache.stats()
        logger.info(
            f"Price cache {config.cache_file}: {stats.valid} valid, {stats.expired} expired"
        )

    matcher = create_station_matcher()
    logger.info(f"Loaded {len(matcher.stations)} station(s)")

    async with aiohttp.ClientSession() as session:
        price_repository = NsPriceRepository(
            session=session, api_token=api_token, timeout=config.ns_api_timeout
        )
        price_service = PriceService(matcher, price_repository, cache)
        api = PriceApi(price_service, config)

        try:
            await api.start()
        except KeyboardInterrupt:
            logger.info("Shutting down...")
            await api.stop()


def run() -> None:
    """Synchronous entry point for the server command."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
