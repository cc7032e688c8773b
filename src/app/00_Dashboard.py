"""Stock Market Dashboard - Main Entry Point.

Wiring layer connecting dashboard logic and views.
Run with `sd dashboard` or `streamlit run src/app/00_Dashboard.py`.
"""

import streamlit as st
from loguru import logger

from src.app.logic.dashboard import SortSpec, ViewState, derive_view, next_sort
from src.app.logic.data_loader import load_demo_stocks, reset_stocks, use_stocks
from src.app.views.common import render_error_banner, render_sidebar_header
from src.app.views.dashboard import (
    render_header,
    render_price_chart,
    render_quote_table,
    render_summary_cards,
    render_table_skeleton,
    render_top_movers,
)
from src.config.settings import load_config
from src.core.config import DataSource, settings
from src.core.domain_models import SortField
from src.core.mapper import quotes_to_df
from src.core.sample_data import INTRADAY_CHART_POINTS

SORT_KEY = "sort_spec"

st.set_page_config(
    page_title="Stock Market Dashboard",
    page_icon="📈",
    layout="wide",
)

try:
    config = load_config(settings.config_path)
except Exception as e:
    st.error(f"Failed to load configuration: {e}")
    logger.exception(f"Configuration error: {e}")
    raise

render_sidebar_header("Stock Dashboard", f"Data source: {settings.data_source.value}")


def handle_sort(selected: SortField) -> None:
    current = st.session_state.get(SORT_KEY, SortSpec())
    st.session_state[SORT_KEY] = next_sort(current, selected)


def handle_refresh() -> None:
    reset_stocks(st.session_state)


search_term = render_header(on_refresh=handle_refresh)

# Show placeholders while the first load blocks the script
loading_placeholder = st.empty()
with loading_placeholder.container():
    render_table_skeleton()

if settings.data_source == DataSource.LIVE:
    stocks = use_stocks(
        st.session_state,
        api_url=settings.stocks_api_url,
        timeout=settings.request_timeout_sec,
    )
else:
    stocks = load_demo_stocks(st.session_state, delay_sec=config.dashboard.demo_delay_sec)
loading_placeholder.empty()

view = derive_view(
    ViewState(
        quotes=quotes_to_df(stocks.data),
        search_term=search_term,
        sort=st.session_state.get(SORT_KEY, SortSpec()),
    ),
    movers_count=config.dashboard.top_movers,
)

render_summary_cards(view.summary)
st.divider()

col_chart, col_movers = st.columns([2, 1])
with col_chart:
    render_price_chart(INTRADAY_CHART_POINTS, config.dashboard.chart_symbol)
with col_movers:
    render_top_movers(view.top_movers)

if stocks.error:
    render_error_banner(stocks.error)

st.divider()
render_quote_table(view.table, view.sort, on_sort=handle_sort, error=stocks.error)
