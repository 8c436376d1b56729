"""
Expense Breakdown Chart

Turns the ledger's category breakdown into a plotly pie chart.
Colours are assigned by position in the breakdown and repeat
every len(CHART_COLORS) categories.
"""

from typing import Optional

import plotly.graph_objects as go

from finpulse.ledger.ledger import Ledger


CHART_COLORS = ["#00C49F", "#FFBB28", "#FF8042", "#0088FE", "#FF4560"]


def breakdown_chart_data(ledger: Ledger) -> list[dict]:
    """Rows of {name, value, color} in breakdown order."""
    return [
        {
            "name": total.name,
            "value": total.value,
            "color": CHART_COLORS[index % len(CHART_COLORS)],
        }
        for index, total in enumerate(ledger.category_totals())
    ]


def build_breakdown_figure(
    ledger: Ledger,
    currency_symbol: str = "",
) -> Optional[go.Figure]:
    """
    Build the breakdown pie chart.

    Returns None for an empty ledger; the caller shows a placeholder instead.
    """
    rows = breakdown_chart_data(ledger)
    if not rows:
        return None

    fig = go.Figure(
        go.Pie(
            labels=[row["name"] for row in rows],
            values=[float(row["value"]) for row in rows],
            marker=dict(colors=[row["color"] for row in rows]),
            sort=False,
            direction="clockwise",
            hovertemplate=f"%{{label}}: {currency_symbol}%{{value:,}}<extra></extra>",
        )
    )
    fig.update_layout(
        height=300,
        margin=dict(t=10, b=10, l=10, r=10),
        showlegend=True,
        template="plotly_dark",
    )
    return fig
