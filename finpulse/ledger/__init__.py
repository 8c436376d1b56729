"""Expense ledger package."""

from finpulse.ledger.ledger import Ledger, parse_amount
from finpulse.ledger.formatting import format_amount, format_currency
from finpulse.ledger.chart import CHART_COLORS, breakdown_chart_data, build_breakdown_figure

__all__ = [
    "CHART_COLORS",
    "Ledger",
    "breakdown_chart_data",
    "build_breakdown_figure",
    "format_amount",
    "format_currency",
    "parse_amount",
]
