"""Quote loading for the Streamlit application.

Two sources feed the dashboard: the quote API (live) and the built-in
sample quotes (demo). Each loads once per browser session and keeps its
result in the session store; reruns reuse it.
"""

import time
from dataclasses import dataclass, field
from typing import Any, Callable, MutableMapping

import requests
from loguru import logger
from pydantic import TypeAdapter

from src.core.domain_models import QuoteRecord
from src.core.sample_data import SAMPLE_QUOTES

STOCKS_STATE_KEY = "stocks_state"
FETCH_ERROR_MESSAGE = "Failed to fetch stock data. Please try again."

_QUOTE_LIST = TypeAdapter(list[QuoteRecord])


@dataclass(frozen=True)
class StocksState:
    """Container for the loaded quotes."""

    data: list[QuoteRecord] = field(default_factory=list)
    loading: bool = True
    error: str | None = None


def fetch_stocks(
    api_url: str,
    session: Any | None = None,
    timeout: float | None = None,
) -> list[QuoteRecord]:
    """Request all quotes from the quote API.

    Args:
        api_url: Full URL of the stocks endpoint
        session: requests-compatible session, injected in tests
        timeout: Seconds to wait, None waits indefinitely

    Returns:
        Quotes in the order the API returned them

    Raises:
        requests.RequestException: On network errors or a non-2xx status
        pydantic.ValidationError: If the payload is not a list of quotes
    """
    http = session or requests
    response = http.get(api_url, timeout=timeout)
    response.raise_for_status()
    quotes = _QUOTE_LIST.validate_python(response.json())
    logger.info(f"Loaded {len(quotes)} quotes from {api_url}")
    return quotes


def use_stocks(
    store: MutableMapping[str, Any],
    api_url: str,
    session: Any | None = None,
    timeout: float | None = None,
) -> StocksState:
    """Load quotes from the API once per session.

    The first call in a session performs exactly one request; later calls
    return the stored state. There is no retry and no polling.

    Args:
        store: Session store, st.session_state in the app
        api_url: Full URL of the stocks endpoint
        session: requests-compatible session, injected in tests
        timeout: Seconds to wait for the API
    """
    cached = store.get(STOCKS_STATE_KEY)
    if cached is not None and not cached.loading:
        return cached

    store[STOCKS_STATE_KEY] = StocksState(loading=True)
    try:
        data = fetch_stocks(api_url, session=session, timeout=timeout)
        state = StocksState(data=data, loading=False)
    except (requests.RequestException, ValueError) as e:
        logger.error(f"Stock fetch from {api_url} failed: {e}")
        state = StocksState(data=[], loading=False, error=FETCH_ERROR_MESSAGE)

    store[STOCKS_STATE_KEY] = state
    return state


def load_demo_stocks(
    store: MutableMapping[str, Any],
    delay_sec: float = 1.5,
    sleep: Callable[[float], None] = time.sleep,
) -> StocksState:
    """Seed the session with the sample quotes after an artificial delay."""
    cached = store.get(STOCKS_STATE_KEY)
    if cached is not None and not cached.loading:
        return cached

    store[STOCKS_STATE_KEY] = StocksState(loading=True)
    try:
        sleep(delay_sec)
        state = StocksState(data=list(SAMPLE_QUOTES), loading=False)
    except Exception as e:
        logger.error(f"Loading demo quotes failed: {e}")
        state = StocksState(data=[], loading=False, error=FETCH_ERROR_MESSAGE)

    store[STOCKS_STATE_KEY] = state
    return state


def reset_stocks(store: MutableMapping[str, Any]) -> None:
    """Drop loaded quotes so the next load fetches again."""
    store.pop(STOCKS_STATE_KEY, None)
