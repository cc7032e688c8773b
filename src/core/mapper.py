"""
Mapping from QuoteRecord models to Polars DataFrames.

The API works with Pydantic records, the dashboard logic with DataFrames
following QUOTE_SCHEMA.
"""

from typing import Iterable

import polars as pl

from src.core.domain_models import QUOTE_SCHEMA, QuoteRecord


def quotes_to_df(quotes: Iterable[QuoteRecord]) -> pl.DataFrame:
    """
    Convert quote records to a DataFrame.

    Args:
        quotes: Records in display order

    Returns:
        DataFrame with QUOTE_SCHEMA columns, empty but typed if no records
    """
    records = [quote.model_dump() for quote in quotes]
    return pl.DataFrame(records, schema=QUOTE_SCHEMA)

