"""Quote pipeline orchestration.

Fetches every tracked symbol, normalizes the raw quotes and collects the
outcome per symbol. One failing symbol never hides the others.
"""

from concurrent.futures import ThreadPoolExecutor
from typing import Any, Mapping, Protocol

from loguru import logger

from src.config.models import CompanyInfo
from src.core.domain_models import QuoteBatch, QuoteRecord, SymbolFailure
from src.core.normalization import normalize_quote


class QuoteClient(Protocol):
    def get_quote(self, symbol: str) -> Mapping[str, Any] | None: ...


class QuotePipeline:
    """Orchestrates quote fetching with dependency injection for testability."""

    def __init__(
        self,
        client: QuoteClient,
        symbols: list[str],
        companies: Mapping[str, CompanyInfo],
        max_workers: int = 1,
    ) -> None:
        """
        Initialize pipeline with client and universe.

        Args:
            client: Anything with get_quote(symbol) returning the raw quote
            symbols: Tickers to fetch, in response order
            companies: Static symbol to company info table
            max_workers: Symbols fetched concurrently, 1 means one after another
        """
        self.client = client
        self.symbols = list(symbols)
        self.companies = companies
        self.max_workers = max_workers
        logger.info(f"QuotePipeline initialized for {len(self.symbols)} symbols")

    def _fetch_symbol(self, symbol: str) -> QuoteRecord | SymbolFailure | None:
        try:
            raw_quote = self.client.get_quote(symbol)
            quote = normalize_quote(symbol, raw_quote, self.companies)
        except Exception as e:
            # Recorded per symbol so the rest of the batch still resolves
            logger.error(f"[{symbol}] Quote fetch failed: {e}")
            return SymbolFailure(symbol=symbol, kind=type(e).__name__, error=str(e))

        if quote is None:
            logger.warning(f"[{symbol}] No quote data, skipping")
        return quote

    def run(self, stop_on_failure: bool = False) -> QuoteBatch:
        """
        Fetch and normalize quotes for all symbols.

        Args:
            stop_on_failure: Stop requesting further symbols after the first
                failure, for callers that discard a batch with any failure

        Returns:
            QuoteBatch with quotes in configuration order, skipped symbols and
            per-symbol failures
        """
        logger.info(f"Fetching quotes for {len(self.symbols)} symbols")

        outcomes: list[QuoteRecord | SymbolFailure | None] = []
        if self.max_workers > 1:
            with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
                futures = [pool.submit(self._fetch_symbol, symbol) for symbol in self.symbols]
                for future in futures:
                    outcomes.append(future.result())
                    if stop_on_failure and isinstance(outcomes[-1], SymbolFailure):
                        pool.shutdown(cancel_futures=True)
                        break
        else:
            for symbol in self.symbols:
                outcomes.append(self._fetch_symbol(symbol))
                if stop_on_failure and isinstance(outcomes[-1], SymbolFailure):
                    break

        batch = QuoteBatch()
        for symbol, outcome in zip(self.symbols, outcomes):
            if outcome is None:
                batch.skipped.append(symbol)
            elif isinstance(outcome, SymbolFailure):
                batch.failures.append(outcome)
            else:
                batch.quotes.append(outcome)

        log_method = logger.warning if batch.failures else logger.success
        log_method(
            f"Quote batch done: {len(batch.quotes)} quotes, "
            f"{len(batch.skipped)} skipped, {len(batch.failures)} failed"
        )
        return batch
