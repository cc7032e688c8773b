from enum import Enum

import polars as pl
from pydantic import BaseModel, ConfigDict, Field

# --- Constants & Schemas ---

# Polars Schema for the dashboard's quote table.
# Column names follow QuoteRecord field names, not the JSON aliases.
QUOTE_SCHEMA = {
    "symbol": pl.Utf8,
    "name": pl.Utf8,
    "price": pl.Float64,
    "change": pl.Float64,
    "change_percent": pl.Float64,
    "volume": pl.Int64,
    "market_cap": pl.Float64,
}


# --- Enums ---


class SortField(str, Enum):
    """Sortable quote table columns. Values are QUOTE_SCHEMA column names."""

    SYMBOL = "symbol"
    NAME = "name"
    PRICE = "price"
    CHANGE = "change"
    CHANGE_PERCENT = "change_percent"
    VOLUME = "volume"
    MARKET_CAP = "market_cap"

    @property
    def is_text(self) -> bool:
        return self in (SortField.SYMBOL, SortField.NAME)


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


# --- Domain Models ---


class QuoteRecord(BaseModel):
    """
    A single symbol's price, change and volume snapshot at fetch time.

    Serialized with camelCase aliases (`changePercent`, `marketCap`) so the
    JSON shape matches what dashboard clients expect.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    symbol: str = Field(min_length=1)
    name: str
    price: float
    change: float
    change_percent: float = Field(alias="changePercent")
    volume: int = Field(ge=0)
    market_cap: float | None = Field(default=None, alias="marketCap")


class SymbolFailure(BaseModel):
    """An error raised while fetching or normalizing one symbol."""

    model_config = ConfigDict(frozen=True)

    symbol: str
    kind: str
    error: str


class QuoteBatch(BaseModel):
    """Outcome of one fetch over the whole ticker universe.

    `quotes` keeps configuration order. `skipped` lists symbols the provider
    had no quote for, `failures` the ones that raised.
    """

    quotes: list[QuoteRecord] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
    failures: list[SymbolFailure] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failures
