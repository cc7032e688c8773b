"""Shared fixtures: company table, raw provider quotes and stub clients."""

import pytest

from src.config.models import CompanyInfo
from src.config.settings import Config
from src.core.domain_models import QuoteRecord
from tests.helpers import raw_quote

COMPANIES = {
    "AAPL": CompanyInfo(name="Apple Inc.", market_cap=2_800_000_000_000),
    "GOOGL": CompanyInfo(name="Alphabet Inc.", market_cap=1_800_000_000_000),
    "TSLA": CompanyInfo(name="Tesla Inc.", market_cap=790_000_000_000),
}


@pytest.fixture
def companies() -> dict[str, CompanyInfo]:
    return dict(COMPANIES)


@pytest.fixture
def config() -> Config:
    return Config(
        universe={
            "symbols": ["AAPL", "GOOGL", "TSLA"],
            "companies": {k: v.model_dump() for k, v in COMPANIES.items()},
        }
    )


@pytest.fixture
def provider_quotes() -> dict[str, dict[str, str] | None]:
    """AAPL and TSLA have quotes, GOOGL has none."""
    return {
        "AAPL": raw_quote("175.4300", "2.1500", "1.2400%", "45234567"),
        "GOOGL": None,
        "TSLA": raw_quote("248.4200", "-5.2300", "-2.0600%", "67890123"),
    }


@pytest.fixture
def sample_quotes() -> list[QuoteRecord]:
    return [
        QuoteRecord(
            symbol="AAPL",
            name="Apple Inc.",
            price=175.43,
            change=2.15,
            change_percent=1.24,
            volume=45_234_567,
            market_cap=2.8e12,
        ),
        QuoteRecord(
            symbol="GOOGL",
            name="Alphabet Inc.",
            price=142.56,
            change=-1.23,
            change_percent=-0.85,
            volume=23_456_789,
            market_cap=1.8e12,
        ),
        QuoteRecord(
            symbol="TSLA",
            name="Tesla Inc.",
            price=248.42,
            change=-5.23,
            change_percent=-2.06,
            volume=67_890_123,
            market_cap=None,
        ),
        QuoteRecord(
            symbol="msft",
            name="microsoft corp.",
            price=378.85,
            change=0.0,
            change_percent=0.0,
            volume=34_567_890,
            market_cap=2.9e12,
        ),
    ]
