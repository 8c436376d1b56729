"""Display formatting for amounts shown on the dashboard."""

from decimal import Decimal
from typing import Optional

from finpulse.config import get_settings


def format_amount(value: Decimal) -> str:
    """
    Group thousands and keep at most three decimals.

    Trailing zeros are dropped: 500000 -> "500,000", 1234.5 -> "1,234.5".
    """
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def format_currency(value: Decimal, symbol: Optional[str] = None) -> str:
    """Prefix a formatted amount with the currency glyph, e.g. "₹500,000"."""
    if symbol is None:
        symbol = get_settings().ledger.currency_symbol
    return f"{symbol}{format_amount(value)}"
