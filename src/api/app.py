"""Quote proxy API.

Serves the tracked quotes reshaped from the upstream provider.
Run with `sd api` or `uvicorn src.api.app:create_app --factory`.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from loguru import logger

from src.api.routes import router
from src.config.settings import Config, load_config
from src.core.config import Settings, settings as default_settings
from src.etl.extract import AlphaVantageClient
from src.etl.pipeline import QuoteClient, QuotePipeline


@asynccontextmanager
async def lifespan(app: FastAPI):
    pipeline: QuotePipeline = app.state.quote_pipeline
    logger.info(f"Quote API ready, tracking {', '.join(pipeline.symbols)}")
    yield
    logger.info("Quote API shutting down")


def create_app(
    settings: Settings | None = None,
    config: Config | None = None,
    quote_client: QuoteClient | None = None,
) -> FastAPI:
    """Build the API application.

    Configuration is validated here so a missing API key or a broken
    company table stops the server before it accepts requests.

    Args:
        settings: Environment settings, defaults to the process settings
        config: Ticker universe, defaults to loading settings.config_path
        quote_client: Upstream client override, mainly for tests
    """
    settings = settings or default_settings
    config = config or load_config(settings.config_path)

    if quote_client is None:
        quote_client = AlphaVantageClient(
            api_key=settings.require_api_key(),
            base_url=settings.alpha_vantage_url,
            timeout=settings.request_timeout_sec,
        )

    app = FastAPI(
        title=f"{settings.app_name} API",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.include_router(router)
    app.state.quote_pipeline = QuotePipeline(
        client=quote_client,
        symbols=config.symbols,
        companies=config.companies,
        max_workers=settings.max_workers,
    )
    return app
