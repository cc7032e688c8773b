from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from loguru import logger

from src.core.domain_models import QuoteBatch, QuoteRecord
from src.etl.pipeline import QuotePipeline

FETCH_ERROR_MESSAGE = "Failed to fetch stock data"

router = APIRouter()


def _pipeline(request: Request) -> QuotePipeline:
    return request.app.state.quote_pipeline


def _error_response() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": FETCH_ERROR_MESSAGE})


@router.get("/health")
def health(request: Request) -> dict[str, str | int]:
    return {"status": "ok", "symbols": len(_pipeline(request).symbols)}


@router.get("/api/stocks", response_model=list[QuoteRecord])
def get_stocks(request: Request):
    """All tracked quotes, or a generic 500 if any symbol failed."""
    try:
        batch = _pipeline(request).run(stop_on_failure=True)
    except Exception:
        logger.exception("Quote batch aborted")
        return _error_response()

    if not batch.ok:
        failed = [f.symbol for f in batch.failures]
        logger.error(f"Rejecting batch, failed symbols: {failed}")
        return _error_response()

    return batch.quotes


@router.get("/api/stocks/batch", response_model=QuoteBatch)
def get_stocks_batch(request: Request):
    """Partial results: quotes that resolved plus per-symbol failures."""
    try:
        return _pipeline(request).run()
    except Exception:
        logger.exception("Quote batch aborted")
        return _error_response()
