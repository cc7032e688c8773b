"""Logic layer for the stock dashboard page.

Derives the table view, summary statistics and top movers from the raw
quotes, the search term and the sort selection. Every derived value is
recomputed from scratch; nothing here mutates its input.
"""

from dataclasses import dataclass, field, replace

import polars as pl

from src.core.domain_models import QUOTE_SCHEMA, SortDirection, SortField

TOP_MOVERS_COUNT = 5


@dataclass(frozen=True)
class SortSpec:
    """Active sort column and direction. Starts on symbol, ascending.

    A column of None keeps source order.
    """

    column: SortField | None = SortField.SYMBOL
    direction: SortDirection = SortDirection.ASC


@dataclass(frozen=True)
class ViewState:
    """Inputs of the dashboard view."""

    quotes: pl.DataFrame = field(default_factory=lambda: pl.DataFrame(schema=QUOTE_SCHEMA))
    search_term: str = ""
    sort: SortSpec = field(default_factory=SortSpec)


@dataclass(frozen=True)
class MarketSummary:
    """Summary card values for the filtered quotes."""

    total: int
    gainers: int
    losers: int
    average_change_percent: float


@dataclass(frozen=True)
class DashboardView:
    """Everything the page renders, derived from a ViewState."""

    table: pl.DataFrame
    summary: MarketSummary
    top_movers: pl.DataFrame
    sort: SortSpec


def next_sort(current: SortSpec, selected: SortField) -> SortSpec:
    """Sort selection after the user clicks a column header.

    Clicking the active column flips its direction, any other column
    starts ascending.
    """
    if selected == current.column:
        direction = (
            SortDirection.DESC if current.direction == SortDirection.ASC else SortDirection.ASC
        )
        return replace(current, direction=direction)
    return SortSpec(column=selected, direction=SortDirection.ASC)


def filter_quotes(df: pl.DataFrame, search_term: str) -> pl.DataFrame:
    """Keep quotes whose symbol or name contains the term, ignoring case."""
    if not search_term:
        return df
    needle = search_term.lower()
    return df.filter(
        pl.col("symbol").str.to_lowercase().str.contains(needle, literal=True)
        | pl.col("name").str.to_lowercase().str.contains(needle, literal=True)
    )


def sort_quotes(df: pl.DataFrame, sort: SortSpec) -> pl.DataFrame:
    """Order quotes by the selected column.

    Text columns compare case-insensitively, numeric columns by value.
    Missing values (unknown market cap) always go last.
    """
    if sort.column is None:
        return df
    descending = sort.direction == SortDirection.DESC
    key = pl.col(sort.column.value)
    if sort.column.is_text:
        key = key.str.to_lowercase()
    return df.sort(key, descending=descending, nulls_last=True)


def summarize(df: pl.DataFrame) -> MarketSummary:
    """Gainer and loser counts plus mean change percent.

    An empty frame averages to 0.0 rather than NaN.
    """
    if df.is_empty():
        return MarketSummary(total=0, gainers=0, losers=0, average_change_percent=0.0)

    row = df.select(
        (pl.col("change") > 0).sum().alias("gainers"),
        (pl.col("change") < 0).sum().alias("losers"),
        pl.col("change_percent").mean().alias("average_change_percent"),
    ).row(0, named=True)

    return MarketSummary(
        total=df.height,
        gainers=int(row["gainers"]),
        losers=int(row["losers"]),
        average_change_percent=float(row["average_change_percent"]),
    )


def top_movers(df: pl.DataFrame, n: int = TOP_MOVERS_COUNT) -> pl.DataFrame:
    """Largest absolute percent moves first, at most n rows."""
    return df.sort(pl.col("change_percent").abs(), descending=True).head(n)


def derive_view(state: ViewState, movers_count: int = TOP_MOVERS_COUNT) -> DashboardView:
    """Compute the rendered view from the current state."""
    filtered = filter_quotes(state.quotes, state.search_term)
    return DashboardView(
        table=sort_quotes(filtered, state.sort),
        # summary and movers use the filtered set, independent of the table sort
        summary=summarize(filtered),
        top_movers=top_movers(filtered, movers_count),
        sort=state.sort,
    )
