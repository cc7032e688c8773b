"""View components for the stock dashboard page.

Renders summary cards, the price chart, top movers and the quote table.
Pure rendering - values come precomputed from the logic layer.
"""

from typing import Callable

import pandas as pd
import plotly.express as px
import polars as pl
import streamlit as st

from src.app.logic.dashboard import MarketSummary, SortSpec
from src.app.views.colors import Colors, change_color
from src.app.views.common import GLOBAL_FONT, GLOBAL_MARGINS, render_empty_state
from src.app.views.formatting import (
    format_change_percent,
    format_currency,
    format_market_cap,
    format_signed_currency,
    format_volume,
)
from src.core.domain_models import SortDirection, SortField

# Table headers in display order; market cap is shown but not sortable
SORTABLE_COLUMNS: list[tuple[SortField, str]] = [
    (SortField.SYMBOL, "Symbol"),
    (SortField.NAME, "Company"),
    (SortField.PRICE, "Price"),
    (SortField.CHANGE, "Change"),
    (SortField.CHANGE_PERCENT, "Change %"),
    (SortField.VOLUME, "Volume"),
]


def render_header(on_refresh: Callable[[], None]) -> str:
    """Render title, search box and refresh button.

    Returns:
        The current search term
    """
    col_title, col_search, col_refresh = st.columns([4, 2, 1], vertical_alignment="bottom")
    with col_title:
        st.title("📈 Stock Market Dashboard")
        st.caption("Real-time stock prices and market data")
    with col_search:
        search_term = st.text_input(
            "Search stocks",
            placeholder="Search stocks...",
            key="search_term",
            label_visibility="collapsed",
        )
    with col_refresh:
        st.button("Refresh Data", on_click=on_refresh, use_container_width=True)
    return search_term


def render_summary_cards(summary: MarketSummary) -> None:
    """Render total, gainers, losers and average change as metric cards."""
    cols = st.columns(4)

    with cols[0]:
        st.metric(label="📊 Total Stocks", value=summary.total, help="Active symbols")
    with cols[1]:
        st.metric(label="📈 Gainers", value=summary.gainers, help="Stocks up today")
    with cols[2]:
        st.metric(label="📉 Losers", value=summary.losers, help="Stocks down today")
    with cols[3]:
        st.metric(
            label="💲 Avg Change",
            value=f"{summary.average_change_percent:.2f}%",
            help="Market average",
        )


def render_price_chart(
    points: list[dict[str, str | float]], symbol: str, plot_height: int = 300
) -> None:
    """Render the intraday price line for one symbol."""
    st.subheader(f"{symbol} Price Chart")
    st.caption("Intraday price movement")

    df_points = pl.DataFrame(points)
    price_min = df_points.select(pl.min("price")).item()
    price_max = df_points.select(pl.max("price")).item()

    fig = px.line(
        df_points,
        x="time",
        y="price",
        labels={"time": "", "price": "Price"},
        height=plot_height,
    )
    fig.update_traces(line=dict(width=2, color=Colors.blue))
    fig.update_layout(
        hovermode="x unified",
        template="plotly_white",
        margin=GLOBAL_MARGINS,
        font=GLOBAL_FONT,
        yaxis=dict(range=[price_min - 1, price_max + 1]),
    )
    st.plotly_chart(fig, use_container_width=True, key="price_chart")


def render_top_movers(df_movers: pl.DataFrame) -> None:
    """Render the biggest percent movers with a colored change badge."""
    st.subheader("Top Movers")
    st.caption("Biggest changes today")

    if df_movers.is_empty():
        st.caption("No matching stocks")
        return

    for row in df_movers.iter_rows(named=True):
        col_left, col_right = st.columns([3, 2])
        with col_left:
            st.markdown(f"**{row['symbol']}**")
            st.caption(format_currency(row["price"]))
        with col_right:
            color = "green" if row["change"] > 0 else "red" if row["change"] < 0 else "gray"
            st.markdown(f":{color}-background[{format_change_percent(row['change_percent'])}]")


def render_table_skeleton(rows: int = 8) -> None:
    """Placeholder rows shown while quotes load."""
    st.subheader("Stock Prices")
    for _ in range(rows):
        cols = st.columns(6)
        for col in cols:
            col.caption("▬▬▬▬")


def render_sort_controls(sort: SortSpec, on_sort: Callable[[SortField], None]) -> None:
    """One button per sortable column, arrow on the active one."""
    cols = st.columns(len(SORTABLE_COLUMNS))
    for col, (sort_field, label) in zip(cols, SORTABLE_COLUMNS):
        arrow = ""
        if sort.column == sort_field:
            arrow = " ↑" if sort.direction == SortDirection.ASC else " ↓"
        col.button(
            f"{label}{arrow}",
            key=f"sort_{sort_field.value}",
            on_click=on_sort,
            args=(sort_field,),
            use_container_width=True,
        )


# Helpers to color cells based on value
def color_change_cell(val: float) -> str:
    if pd.isna(val):
        return ""
    return f"color: {change_color(val)}"


def render_quote_table(
    df_table: pl.DataFrame,
    sort: SortSpec,
    on_sort: Callable[[SortField], None],
    error: str | None = None,
) -> None:
    """Render sort controls and the filtered, sorted quotes with formatted columns.

    With a load error set, an empty table stays empty without the search hint;
    the page shows the error banner instead.
    """
    st.subheader("Stock Prices")
    st.caption("Real-time stock data with sorting and filtering capabilities")
    render_sort_controls(sort, on_sort)

    if df_table.is_empty():
        if error:
            return
        render_empty_state("No stocks match the current search", icon="🔍")
        return

    df_display = df_table.with_columns(
        pl.col("price").map_elements(format_currency, return_dtype=pl.Utf8).alias("price_fmt"),
        pl.col("change")
        .map_elements(format_signed_currency, return_dtype=pl.Utf8)
        .alias("change_fmt"),
        pl.col("change_percent")
        .map_elements(format_change_percent, return_dtype=pl.Utf8)
        .alias("change_percent_fmt"),
        pl.col("volume").map_elements(format_volume, return_dtype=pl.Utf8).alias("volume_fmt"),
        pl.col("market_cap")
        .map_elements(format_market_cap, return_dtype=pl.Utf8, skip_nulls=False)
        .alias("market_cap_fmt"),
    ).to_pandas()

    styler = df_display.style.apply(
        lambda _: df_display["change"].map(color_change_cell),
        subset=["change_fmt"],
    ).apply(
        lambda _: df_display["change_percent"].map(color_change_cell),
        subset=["change_percent_fmt"],
    )

    st.dataframe(
        styler,
        hide_index=True,
        use_container_width=True,
        column_order=[
            "symbol",
            "name",
            "price_fmt",
            "change_fmt",
            "change_percent_fmt",
            "volume_fmt",
            "market_cap_fmt",
        ],
        column_config={
            "symbol": st.column_config.TextColumn("Symbol", width="small"),
            "name": st.column_config.TextColumn("Company", width="medium"),
            "price_fmt": st.column_config.TextColumn("Price"),
            "change_fmt": st.column_config.TextColumn("Change"),
            "change_percent_fmt": st.column_config.TextColumn("Change %"),
            "volume_fmt": st.column_config.TextColumn("Volume"),
            "market_cap_fmt": st.column_config.TextColumn("Market Cap"),
        },
    )
