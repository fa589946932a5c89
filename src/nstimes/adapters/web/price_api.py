"""Starlette HTTP API exposing price lookups."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.responses import JSONResponse
from starlette.routing import Route

from nstimes.adapters.web.rate_limit_middleware import RateLimitMiddleware
from nstimes.domain.errors import (
    AmbiguousStationError,
    NsApiError,
    StationNotFoundError,
)
from nstimes.domain.models.travel import TravelClass

if TYPE_CHECKING:
    from starlette.requests import Request
    from starlette.types import ASGIApp

    from nstimes.adapters.config import AppConfig
    from nstimes.application.services import PriceService

logger = logging.getLogger(__name__)


def error_response(
    message: str, status_code: int, matches: list[dict[str, Any]] | None = None
) -> JSONResponse:
    """Build a JSON error body, including station candidates when given."""
    body: dict[str, Any] = {"error": message}
    if matches is not None:
        body["matches"] = matches
    return JSONResponse(body, status_code=status_code)


def parse_travel_class(value: str | None) -> TravelClass | None:
    """Parse the 'class' query parameter; missing means second class."""
    if value is None:
        return TravelClass.SECOND_CLASS
    try:
        return TravelClass(int(value))
    except ValueError:
        return None


class PriceApi:
    """HTTP adapter serving /price and /health."""

    def __init__(self, price_service: PriceService, config: AppConfig) -> None:
        """Initialize the API.

        Args:
            price_service: Service answering price queries.
            config: Application configuration (host, port, rate limit).
        """
        self.price_service = price_service
        self.config = config
        self._server: Any | None = None

    async def get_price(self, request: Request) -> JSONResponse:
        """GET /price?from=...&to=...&class=1|2."""
        from_query = request.query_params.get("from")
        to_query = request.query_params.get("to")
        if not from_query or not to_query:
            return error_response("Both 'from' and 'to' query parameters are required", 400)

        travel_class = parse_travel_class(request.query_params.get("class"))
        if travel_class is None:
            return error_response("class must be 1 or 2", 400)

        try:
            quote = await self.price_service.get_prices(from_query, to_query, travel_class)
        except StationNotFoundError as e:
            field = "from" if e.query == from_query else "to"
            return error_response(f"No stations found for '{field}' query: {e.query}", 400)
        except AmbiguousStationError as e:
            field = "from" if e.query == from_query else "to"
            matches = [
                {"name": station.display_name, "uic_code": station.code}
                for station in e.candidates
            ]
            return error_response(
                f"Multiple stations matched for '{field}' query: {e.query}. "
                "Please refine your query.",
                400,
                matches=matches,
            )
        except NsApiError as e:
            logger.error(f"Price lookup failed for {from_query} -> {to_query}: {e}")
            return error_response(f"Failed to fetch prices: {e}", 502)

        price = quote.first_price
        if price is None:
            return error_response("No prices found for this route", 404)

        return JSONResponse(
            {
                "from": quote.origin.display_name,
                "to": quote.destination.display_name,
                "price_cents": price.total_price_in_cents,
                "travel_class": travel_class.label,
                "cached": quote.from_cache,
            }
        )

    async def health(self, _request: Request) -> JSONResponse:
        """Health check endpoint for load balancers and monitoring."""
        return JSONResponse({"status": "ok"})

    def build_app(self) -> ASGIApp:
        """Build the Starlette app wrapped with rate limiting."""
        app = Starlette(
            routes=[
                Route("/price", self.get_price, methods=["GET"]),
                Route("/health", self.health, methods=["GET"]),
            ]
        )
        return RateLimitMiddleware(app, requests_per_minute=self.config.rate_limit_per_minute)

    async def start(self) -> None:
        """Serve the API with uvicorn until stopped."""
        import uvicorn

        config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(config)
        logger.info(f"Server running on http://{self.config.host}:{self.config.port}")
        await self._server.serve()

    async def stop(self) -> None:
        """Ask the server to exit."""
        if self._server:
            self._server.should_exit = True
