from typing import Any, Mapping

from src.config.models import CompanyInfo
from src.core.domain_models import QuoteRecord
from src.core.errors import MissingCompanyInfoError

# Alpha Vantage GLOBAL_QUOTE field labels, kept verbatim
PRICE_FIELD = "05. price"
VOLUME_FIELD = "06. volume"
CHANGE_FIELD = "09. change"
CHANGE_PERCENT_FIELD = "10. change percent"


def parse_percent(value: Any) -> float:
    """Parse a provider percentage such as "1.2400%" into 1.24."""
    text = str(value).strip()
    if text.endswith("%"):
        text = text[:-1]
    return float(text)


def normalize_quote(
    symbol: str,
    raw_quote: Mapping[str, Any] | None,
    companies: Mapping[str, CompanyInfo],
) -> QuoteRecord | None:
    """Turn a raw provider quote into a QuoteRecord.

    Args:
        symbol: Ticker the quote was requested for
        raw_quote: The provider's "Global Quote" object, may be missing or empty
        companies: Static symbol to company info table

    Returns:
        The normalized quote, or None if the provider had no data for the symbol

    Raises:
        MissingCompanyInfoError: If the company table has no entry for the symbol
        ValueError: If a numeric field is not a number
        KeyError: If a numeric field is missing from a non-empty quote
    """
    if not raw_quote:
        return None

    info = companies.get(symbol)
    if info is None:
        raise MissingCompanyInfoError(symbol)

    return QuoteRecord(
        symbol=symbol,
        name=info.name,
        price=float(raw_quote[PRICE_FIELD]),
        change=float(raw_quote[CHANGE_FIELD]),
        change_percent=parse_percent(raw_quote[CHANGE_PERCENT_FIELD]),
        volume=int(raw_quote[VOLUME_FIELD]),
        market_cap=info.market_cap,
    )
