import polars as pl
import pytest

from src.app.logic.dashboard import (
    SortSpec,
    ViewState,
    derive_view,
    filter_quotes,
    next_sort,
    sort_quotes,
    summarize,
    top_movers,
)
from src.core.domain_models import QUOTE_SCHEMA, SortDirection, SortField
from src.core.mapper import quotes_to_df
from src.core.sample_data import SAMPLE_QUOTES


@pytest.fixture
def df_quotes(sample_quotes) -> pl.DataFrame:
    return quotes_to_df(sample_quotes)


def symbols(df: pl.DataFrame) -> list[str]:
    return df.get_column("symbol").to_list()


# --- Filtering ---


@pytest.mark.parametrize("term", ["", "a", "APPLE", "inc", "t", "xyz", "Corp."])
def test_filter_is_subset_matching_symbol_or_name(df_quotes, term) -> None:
    filtered = filter_quotes(df_quotes, term)

    assert set(symbols(filtered)) <= set(symbols(df_quotes))
    for row in filtered.iter_rows(named=True):
        assert term.lower() in row["symbol"].lower() or term.lower() in row["name"].lower()
    excluded = df_quotes.filter(~pl.col("symbol").is_in(symbols(filtered)))
    for row in excluded.iter_rows(named=True):
        assert term.lower() not in row["symbol"].lower()
        assert term.lower() not in row["name"].lower()


def test_filter_empty_term_matches_everything(df_quotes) -> None:
    assert filter_quotes(df_quotes, "").equals(df_quotes)


def test_filter_is_case_insensitive_on_symbol_and_name(df_quotes) -> None:
    assert symbols(filter_quotes(df_quotes, "googl")) == ["GOOGL"]
    assert symbols(filter_quotes(df_quotes, "TESLA")) == ["TSLA"]
    assert symbols(filter_quotes(df_quotes, "MSFT")) == ["msft"]


def test_filter_treats_term_literally(df_quotes) -> None:
    assert filter_quotes(df_quotes, ".*").is_empty()
    assert symbols(filter_quotes(df_quotes, "corp.")) == ["msft"]


# --- Sorting ---


def test_next_sort_new_field_starts_ascending() -> None:
    spec = next_sort(SortSpec(), SortField.PRICE)

    assert spec == SortSpec(column=SortField.PRICE, direction=SortDirection.ASC)


def test_next_sort_same_field_toggles() -> None:
    spec = next_sort(SortSpec(), SortField.PRICE)
    spec = next_sort(spec, SortField.PRICE)
    assert spec.direction == SortDirection.DESC

    spec = next_sort(spec, SortField.PRICE)
    assert spec.direction == SortDirection.ASC


def test_initial_sort_is_symbol_ascending() -> None:
    assert SortSpec() == SortSpec(column=SortField.SYMBOL, direction=SortDirection.ASC)


def test_first_click_on_symbol_sorts_descending() -> None:
    assert next_sort(SortSpec(), SortField.SYMBOL).direction == SortDirection.DESC


def test_default_view_sorts_by_symbol() -> None:
    view = derive_view(ViewState(quotes=quotes_to_df(reversed(SAMPLE_QUOTES))))

    assert symbols(view.table) == sorted(q.symbol for q in SAMPLE_QUOTES)


def test_next_sort_switching_field_resets_to_ascending() -> None:
    spec = SortSpec(column=SortField.PRICE, direction=SortDirection.DESC)

    spec = next_sort(spec, SortField.VOLUME)

    assert spec == SortSpec(column=SortField.VOLUME, direction=SortDirection.ASC)


def test_sort_numeric_both_directions(df_quotes) -> None:
    asc = sort_quotes(df_quotes, SortSpec(SortField.PRICE, SortDirection.ASC))
    desc = sort_quotes(df_quotes, SortSpec(SortField.PRICE, SortDirection.DESC))

    assert asc.get_column("price").to_list() == [142.56, 175.43, 248.42, 378.85]
    assert desc.get_column("price").to_list() == [378.85, 248.42, 175.43, 142.56]


def test_sort_text_ignores_case(df_quotes) -> None:
    asc = sort_quotes(df_quotes, SortSpec(SortField.SYMBOL, SortDirection.ASC))

    assert symbols(asc) == ["AAPL", "GOOGL", "msft", "TSLA"]


def test_sort_by_name_descending(df_quotes) -> None:
    desc = sort_quotes(df_quotes, SortSpec(SortField.NAME, SortDirection.DESC))

    assert desc.get_column("name").to_list() == [
        "Tesla Inc.",
        "microsoft corp.",
        "Apple Inc.",
        "Alphabet Inc.",
    ]


@pytest.mark.parametrize("direction", list(SortDirection))
def test_sort_market_cap_puts_missing_last(df_quotes, direction) -> None:
    ordered = sort_quotes(df_quotes, SortSpec(SortField.MARKET_CAP, direction))

    assert symbols(ordered)[-1] == "TSLA"


@pytest.mark.parametrize("sort_field", list(SortField))
def test_sort_is_a_permutation(df_quotes, sort_field) -> None:
    ordered = sort_quotes(df_quotes, SortSpec(sort_field, SortDirection.DESC))

    assert sorted(symbols(ordered)) == sorted(symbols(df_quotes))
    assert ordered.height == df_quotes.height


def test_no_sort_column_keeps_source_order(df_quotes) -> None:
    ordered = sort_quotes(df_quotes, SortSpec(column=None))

    assert symbols(ordered) == ["AAPL", "GOOGL", "TSLA", "msft"]


# --- Summary ---


def test_summarize_counts_and_average(df_quotes) -> None:
    summary = summarize(df_quotes)

    assert summary.total == 4
    assert summary.gainers == 1
    assert summary.losers == 2
    assert summary.average_change_percent == pytest.approx((1.24 - 0.85 - 2.06 + 0.0) / 4)


def test_summarize_empty_is_zero_not_nan() -> None:
    summary = summarize(pl.DataFrame(schema=QUOTE_SCHEMA))

    assert summary.total == 0
    assert summary.gainers == 0
    assert summary.losers == 0
    assert summary.average_change_percent == 0.0
    assert f"{summary.average_change_percent:.2f}%" == "0.00%"


# --- Top movers ---


def test_top_movers_sorted_by_absolute_change() -> None:
    df = quotes_to_df(SAMPLE_QUOTES)

    movers = top_movers(df)

    assert symbols(movers) == ["NFLX", "TSLA", "NVDA", "AMZN", "MSFT"]
    moves = movers.get_column("change_percent").abs().to_list()
    assert moves == sorted(moves, reverse=True)


@pytest.mark.parametrize("n_rows", [0, 1, 3, 5, 8])
def test_top_movers_length(n_rows) -> None:
    df = quotes_to_df(SAMPLE_QUOTES[:n_rows])

    assert top_movers(df).height == min(5, n_rows)


def test_top_movers_does_not_touch_table_order() -> None:
    df = quotes_to_df(SAMPLE_QUOTES)
    state = ViewState(quotes=df, sort=SortSpec(SortField.SYMBOL, SortDirection.ASC))

    view = derive_view(state)

    assert symbols(view.table) == sorted(q.symbol for q in SAMPLE_QUOTES)
    assert symbols(view.top_movers)[0] == "NFLX"
    assert symbols(df) == [q.symbol for q in SAMPLE_QUOTES]


# --- Derived view ---


def test_derive_view_summarizes_filtered_set() -> None:
    state = ViewState(
        quotes=quotes_to_df(SAMPLE_QUOTES),
        search_term="inc",
        sort=SortSpec(SortField.CHANGE_PERCENT, SortDirection.DESC),
    )

    view = derive_view(state)

    assert symbols(view.table) == ["NFLX", "AMZN", "AAPL", "GOOGL", "TSLA"]
    assert view.summary.total == 5
    assert view.summary.gainers == 3
    assert view.summary.losers == 2
    assert view.top_movers.height == 5
    assert view.sort == state.sort


def test_derive_view_with_no_matches() -> None:
    view = derive_view(ViewState(quotes=quotes_to_df(SAMPLE_QUOTES), search_term="zzz"))

    assert view.table.is_empty()
    assert view.top_movers.is_empty()
    assert view.summary.average_change_percent == 0.0


def test_default_view_state_is_empty() -> None:
    view = derive_view(ViewState())

    assert view.table.is_empty()
    assert view.summary.total == 0
