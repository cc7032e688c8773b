"""Stock Dashboard - Main Entry Point with CLI Commands.

Supports:
- api: Serve the quote proxy API
- dashboard: Launch the Streamlit dashboard
- quotes: Fetch all tracked quotes once and print them
"""

import argparse
import subprocess
import sys
from pathlib import Path

import polars as pl
import uvicorn
from loguru import logger

from src.config.settings import load_config
from src.core.config import setup_logging, settings
from src.core.errors import ConfigurationError
from src.core.mapper import quotes_to_df
from src.etl.extract import AlphaVantageClient
from src.etl.pipeline import QuotePipeline

DASHBOARD_PAGE = Path(__file__).parent / "app" / "00_Dashboard.py"


def cmd_api(args: argparse.Namespace) -> None:
    """Serve the quote API with uvicorn."""
    host = args.host or settings.api_host
    port = args.port or settings.api_port
    logger.info(f"=== Starting Quote API on {host}:{port} ===")
    uvicorn.run(
        "src.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )


def cmd_dashboard(args: argparse.Namespace) -> None:
    """Launch the Streamlit dashboard."""
    logger.info(f"=== Launching dashboard ({settings.data_source.value} data) ===")
    command = [sys.executable, "-m", "streamlit", "run", str(DASHBOARD_PAGE)]
    if args.port:
        command += ["--server.port", str(args.port)]
    sys.exit(subprocess.call(command))


def cmd_quotes(args: argparse.Namespace) -> None:
    """Fetch quotes for all tracked symbols and print the result."""
    logger.info("=== Fetching Quotes ===")
    config = load_config(settings.config_path)

    try:
        api_key = settings.require_api_key()
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)

    client = AlphaVantageClient(
        api_key=api_key,
        base_url=settings.alpha_vantage_url,
        timeout=settings.request_timeout_sec,
    )
    pipeline = QuotePipeline(
        client,
        symbols=config.symbols,
        companies=config.companies,
        max_workers=settings.max_workers,
    )
    batch = pipeline.run()

    with pl.Config(tbl_rows=len(config.symbols), tbl_cols=-1):
        print(quotes_to_df(batch.quotes))

    for failure in batch.failures:
        logger.error(f"  • {failure.symbol}: {failure.kind} {failure.error}")
    if batch.skipped:
        logger.warning(f"No data for: {', '.join(batch.skipped)}")
    if not batch.ok:
        sys.exit(1)


def main() -> None:
    """Main entry point with CLI argument parsing."""
    parser = argparse.ArgumentParser(
        description="Stock Dashboard - Quote API and Dashboard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--log-level", help="Override LOG_LEVEL")

    subparsers = parser.add_subparsers(dest="command", required=True, help="Available commands")

    # API command
    parser_api = subparsers.add_parser("api", help="Serve the quote proxy API")
    parser_api.add_argument("--host", help="Bind address (default: API_HOST)")
    parser_api.add_argument("--port", type=int, help="Port (default: API_PORT)")
    parser_api.set_defaults(func=cmd_api)

    # Dashboard command
    parser_dashboard = subparsers.add_parser("dashboard", help="Launch the Streamlit dashboard")
    parser_dashboard.add_argument("--port", type=int, help="Streamlit server port")
    parser_dashboard.set_defaults(func=cmd_dashboard)

    # Quotes command
    parser_quotes = subparsers.add_parser("quotes", help="Fetch and print all tracked quotes")
    parser_quotes.set_defaults(func=cmd_quotes)

    # Parse arguments and execute
    args = parser.parse_args()
    setup_logging(args.log_level)
    args.func(args)


if __name__ == "__main__":
    main()
