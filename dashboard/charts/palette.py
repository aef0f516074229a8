"""dashboard.charts.palette

Fixed colors per chart kind, plus the value-banded colors for geo points.
"""

from __future__ import annotations

from dashboard.contracts.models import ChartStyle

BAR_STYLE = ChartStyle(
    background_color="rgba(54, 162, 235, 0.6)",
    border_color="rgba(54, 162, 235, 1)",
    border_width=1,
)

HORIZONTAL_BAR_STYLE = ChartStyle(
    background_color="rgba(153, 102, 255, 0.6)",
    border_color="rgba(153, 102, 255, 1)",
    border_width=1,
)

PIE_PALETTE = [
    "#FF6384",
    "#36A2EB",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#FF6384",
    "#C9CBCF",
]

PIE_STYLE = ChartStyle(background_color=list(PIE_PALETTE))

LINE_STYLE = ChartStyle(
    background_color="rgba(75, 192, 192, 0.2)",
    border_color="rgba(75, 192, 192, 1)",
    tension=0.1,
)

SCATTER_STYLE = ChartStyle(
    background_color="rgba(255, 99, 132, 0.6)",
    border_color="rgba(255, 99, 132, 1)",
)

GEO_HIGH = "#ff0000"
GEO_MEDIUM = "#ff8800"
GEO_LOW = "#00ff00"


def color_by_value(value: float) -> str:
    if value > 2_000_000:
        return GEO_HIGH
    if value > 1_000_000:
        return GEO_MEDIUM
    return GEO_LOW
