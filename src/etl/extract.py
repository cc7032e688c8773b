"""Quote extraction from the Alpha Vantage HTTP API.

One GET per symbol using the GLOBAL_QUOTE function.
Validates the response shape before returning to the caller.
"""

from typing import Any

import requests
from loguru import logger

from src.core.errors import UpstreamResponseError

QUOTE_KEY = "Global Quote"

# Keys Alpha Vantage uses for throttling and usage notices instead of data
NOTICE_KEYS = ("Note", "Information")


class AlphaVantageClient:
    """Fetches latest quotes from Alpha Vantage, one symbol per request."""

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://www.alphavantage.co/query",
        timeout: float | None = 10.0,
        session: Any | None = None,
    ) -> None:
        """
        Args:
            api_key: Alpha Vantage API key
            base_url: Query endpoint of the provider
            timeout: Seconds per request, None waits indefinitely
            session: requests-compatible session, injected in tests
        """
        self.api_key = api_key
        self.base_url = base_url
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_quote(self, symbol: str) -> dict[str, str] | None:
        """
        Fetch the raw "Global Quote" object for a symbol.

        Args:
            symbol: Ticker symbol (e.g., "AAPL")

        Returns:
            The provider's quote object, or None when the provider has no quote
            for the symbol (unknown ticker, throttling notice, empty object)

        Raises:
            requests.HTTPError: On a non-2xx response
            requests.RequestException: On network errors
            UpstreamResponseError: If the body is not a JSON object
        """
        logger.debug(f"[{symbol}] Requesting latest quote")

        response = self.session.get(
            self.base_url,
            params={"function": "GLOBAL_QUOTE", "symbol": symbol, "apikey": self.api_key},
            timeout=self.timeout,
        )
        response.raise_for_status()

        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamResponseError(f"[{symbol}] Response is not JSON") from e

        if not isinstance(payload, dict):
            raise UpstreamResponseError(
                f"[{symbol}] Expected a JSON object, got {type(payload).__name__}"
            )

        quote = payload.get(QUOTE_KEY)
        if not quote:
            notice = next((payload[k] for k in NOTICE_KEYS if k in payload), None)
            if notice:
                logger.warning(f"[{symbol}] Provider notice instead of quote: {notice}")
            return None

        if not isinstance(quote, dict):
            raise UpstreamResponseError(f"[{symbol}] Malformed {QUOTE_KEY!r} object")

        return quote
