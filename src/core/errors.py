"""Exception types shared by the API and the dashboard."""


class StockDashboardError(Exception):
    """Base class for all application errors."""


class ConfigurationError(StockDashboardError):
    """Settings or configuration files are missing or inconsistent."""


class MissingCompanyInfoError(ConfigurationError):
    """A tracked symbol has no entry in the company table."""

    def __init__(self, symbol: str) -> None:
        super().__init__(f"No company info configured for symbol {symbol!r}")
        self.symbol = symbol


class UpstreamResponseError(StockDashboardError):
    """The quote provider answered with something we cannot read."""
