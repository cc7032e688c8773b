"""Pydantic models for the ticker universe and dashboard configuration."""

from pydantic import BaseModel, Field, field_validator, model_validator


class CompanyInfo(BaseModel):
    """Static company data the quote provider does not report."""

    name: str = Field(min_length=1, description="Display name of the company")
    market_cap: float = Field(gt=0, description="Market capitalization in USD")


class UniverseConfig(BaseModel):
    """Tracked tickers and their company lookup table."""

    symbols: list[str] = Field(description="Tickers in response order")
    companies: dict[str, CompanyInfo] = Field(description="Symbol to company info")

    @field_validator("symbols")
    @classmethod
    def normalize_symbols(cls, v: list[str]) -> list[str]:
        """Uppercase symbols and reject empty or duplicate ones."""
        symbols = [s.strip().upper() for s in v]
        if not symbols or any(not s for s in symbols):
            raise ValueError("Symbols must be non-empty strings")
        duplicates = sorted({s for s in symbols if symbols.count(s) > 1})
        if duplicates:
            raise ValueError(f"Duplicate symbols: {duplicates}")
        return symbols

    @field_validator("companies")
    @classmethod
    def normalize_company_keys(cls, v: dict[str, CompanyInfo]) -> dict[str, CompanyInfo]:
        return {k.strip().upper(): info for k, info in v.items()}

    @model_validator(mode="after")
    def check_companies_cover_symbols(self) -> "UniverseConfig":
        """Every tracked symbol needs a company entry."""
        missing = [s for s in self.symbols if s not in self.companies]
        if missing:
            raise ValueError(f"Missing company info for symbols: {missing}")
        return self


class DashboardConfig(BaseModel):
    """Settings for the Streamlit page."""

    chart_symbol: str = Field(default="AAPL")
    demo_delay_sec: float = Field(default=1.5, ge=0)
    top_movers: int = Field(default=5, ge=1)
