"""Display formatting for prices, changes, volumes and market caps."""


def format_currency(value: float) -> str:
    """US dollar amount with thousands separators, e.g. -$1,234.56."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_signed_currency(value: float) -> str:
    """Currency with an explicit plus for gains, e.g. +$2.15."""
    prefix = "+" if value > 0 else ""
    return f"{prefix}{format_currency(value)}"


def format_change_percent(value: float) -> str:
    """Percent change with two decimals and a plus for gains."""
    prefix = "+" if value > 0 else ""
    return f"{prefix}{value:.2f}%"


def format_market_cap(value: float | None) -> str:
    """Compact market cap: $2.80T, $190.00B, $12.50M, else the full amount."""
    if not value:
        return "N/A"
    if value >= 1e12:
        return f"${value / 1e12:.2f}T"
    if value >= 1e9:
        return f"${value / 1e9:.2f}B"
    if value >= 1e6:
        return f"${value / 1e6:.2f}M"
    return f"${value:,.0f}"


def format_volume(value: int) -> str:
    """Compact share volume: 45.2M, 12.3K, else the full count."""
    if value >= 1e6:
        return f"{value / 1e6:.1f}M"
    if value >= 1e3:
        return f"{value / 1e3:.1f}K"
    return f"{value:,}"
