"""HTTP client for NS API requests."""

import logging
from typing import TYPE_CHECKING, Any

import aiohttp

from nstimes.adapters.api_request_logger import log_api_request
from nstimes.adapters.ns_api.constants import (
    DEFAULT_PRICE_PARAMS,
    NS_PRICE_URL,
    SUBSCRIPTION_KEY_HEADER,
)
from nstimes.domain.errors import NsApiError

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from aiohttp import ClientResponse, ClientSession


class NsHttpClient:
    """HTTP client for the NS travel information API."""

    def __init__(self, session: "ClientSession", api_token: str, timeout: float = 10) -> None:
        """Initialize with an aiohttp session and the subscription key."""
        self._session = session
        self._api_token = api_token
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    def _headers(self) -> dict[str, str]:
        return {
            "Cache-Control": "no-cache",
            SUBSCRIPTION_KEY_HEADER: self._api_token,
        }

    @staticmethod
    def _extract_prices(data: Any) -> list[dict[str, Any]]:
        """Extract the price list from a {"payload": {"prices": [...]}} response."""
        payload = data.get("payload") if isinstance(data, dict) else None
        prices = payload.get("prices") if isinstance(payload, dict) else None
        if not isinstance(prices, list):
            raise NsApiError("Unexpected price response format")
        return [price for price in prices if isinstance(price, dict)]

    async def _handle_price_response(self, response: "ClientResponse") -> list[dict[str, Any]]:
        """Handle price API response."""
        if response.status != 200:
            response_text = await response.text()
            logger.warning(f"NS API returned status {response.status}: {response_text[:200]}")
            raise NsApiError(
                response_text[:200] or "(empty response body)", status_code=response.status
            )

        try:
            data = await response.json()
        except ValueError as e:
            logger.warning(f"NS API returned invalid JSON: {e}")
            raise NsApiError("Invalid JSON in price response") from e
        return self._extract_prices(data)

    async def fetch_prices(
        self,
        from_code: int,
        to_code: int,
        travel_class: str,
        travel_type: str,
    ) -> list[dict[str, Any]]:
        """Fetch prices from the NS price endpoint.

        Args:
            from_code: UIC code of the origin station.
            to_code: UIC code of the destination station.
            travel_class: 'FIRST_CLASS' or 'SECOND_CLASS'.
            travel_type: 'single' or 'return'.

        Returns:
            Raw price dictionaries in API order.

        Raises:
            NsApiError: If the request fails or the response is not understood.
        """
        params = {
            "fromStation": str(from_code),
            "toStation": str(to_code),
            "travelClass": travel_class,
            "travelType": travel_type,
            **DEFAULT_PRICE_PARAMS,
        }
        headers = self._headers()
        log_api_request("GET", NS_PRICE_URL, params=params, headers=headers)

        try:
            async with self._session.get(
                NS_PRICE_URL, params=params, headers=headers, timeout=self._timeout
            ) as response:
                return await self._handle_price_response(response)
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"Error fetching NS prices: {e}")
            raise NsApiError(f"Failed to fetch prices: {e}") from e
