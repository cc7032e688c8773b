"""Static quotes and chart points for the demo data source."""

from src.core.domain_models import QuoteRecord

SAMPLE_QUOTES: list[QuoteRecord] = [
    QuoteRecord(
        symbol="AAPL",
        name="Apple Inc.",
        price=175.43,
        change=2.15,
        change_percent=1.24,
        volume=45_234_567,
        market_cap=2_800_000_000_000,
    ),
    QuoteRecord(
        symbol="GOOGL",
        name="Alphabet Inc.",
        price=142.56,
        change=-1.23,
        change_percent=-0.85,
        volume=23_456_789,
        market_cap=1_800_000_000_000,
    ),
    QuoteRecord(
        symbol="MSFT",
        name="Microsoft Corp.",
        price=378.85,
        change=4.67,
        change_percent=1.25,
        volume=34_567_890,
        market_cap=2_900_000_000_000,
    ),
    QuoteRecord(
        symbol="TSLA",
        name="Tesla Inc.",
        price=248.42,
        change=-5.23,
        change_percent=-2.06,
        volume=67_890_123,
        market_cap=790_000_000_000,
    ),
    QuoteRecord(
        symbol="AMZN",
        name="Amazon.com Inc.",
        price=145.78,
        change=1.89,
        change_percent=1.31,
        volume=45_678_901,
        market_cap=1_500_000_000_000,
    ),
    QuoteRecord(
        symbol="NVDA",
        name="NVIDIA Corp.",
        price=875.28,
        change=12.45,
        change_percent=1.44,
        volume=56_789_012,
        market_cap=2_200_000_000_000,
    ),
    QuoteRecord(
        symbol="META",
        name="Meta Platforms",
        price=485.32,
        change=-3.21,
        change_percent=-0.66,
        volume=23_456_789,
        market_cap=1_200_000_000_000,
    ),
    QuoteRecord(
        symbol="NFLX",
        name="Netflix Inc.",
        price=425.67,
        change=8.92,
        change_percent=2.14,
        volume=12_345_678,
        market_cap=190_000_000_000,
    ),
]

# Intraday sample points for the price chart
INTRADAY_CHART_POINTS: list[dict[str, str | float]] = [
    {"time": "09:30", "price": 173.28},
    {"time": "10:00", "price": 174.15},
    {"time": "10:30", "price": 173.89},
    {"time": "11:00", "price": 175.43},
    {"time": "11:30", "price": 174.92},
    {"time": "12:00", "price": 175.67},
]
