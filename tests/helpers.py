"""Test doubles for the quote provider and HTTP sessions."""

from typing import Any

import requests


def raw_quote(price: str, change: str, change_percent: str, volume: str) -> dict[str, str]:
    """A GLOBAL_QUOTE object as Alpha Vantage returns it."""
    return {
        "01. symbol": "X",
        "05. price": price,
        "06. volume": volume,
        "09. change": change,
        "10. change percent": change_percent,
    }


class StubQuoteClient:
    """Returns canned raw quotes; raises for symbols listed in `errors`."""

    def __init__(
        self,
        quotes: dict[str, dict[str, str] | None],
        errors: dict[str, Exception] | None = None,
    ) -> None:
        self.quotes = quotes
        self.errors = errors or {}
        self.calls: list[str] = []

    def get_quote(self, symbol: str) -> dict[str, str] | None:
        self.calls.append(symbol)
        if symbol in self.errors:
            raise self.errors[symbol]
        return self.quotes.get(symbol)


class FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self.payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


class FakeSession:
    """Records GET calls and answers with queued responses."""

    def __init__(self, *responses: FakeResponse | Exception) -> None:
        self.responses = list(responses)
        self.calls: list[dict[str, Any]] = []

    def get(self, url: str, params: dict | None = None, timeout: float | None = None) -> Any:
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response
