"""dashboard.charts.summary

Executive summary text derived from the computed payloads.
"""

from __future__ import annotations

from datetime import date
from typing import Optional

from dashboard.contracts.models import (
    CategoricalChart,
    ColumnClassification,
    ColumnStats,
    GeoPoint,
    TextSummary,
    TimeSeriesChart,
)

MAX_METRIC_FINDINGS = 4
_CURRENCY_HINTS = ("revenue", "profit", "cost")


def format_number(num: float) -> str:
    """Compact number: 1.5M, 12.3K, or grouped digits below a thousand."""
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}K"
    rounded = round(num, 3)
    if float(rounded).is_integer():
        return f"{int(rounded):,}"
    return f"{rounded:,}"


def is_currency_metric(name: str) -> bool:
    low = name.lower()
    return any(h in low for h in _CURRENCY_HINTS)


def format_metric(name: str, num: float) -> str:
    text = format_number(num)
    return f"${text}" if is_currency_metric(name) else text


def metric_label(name: str) -> str:
    return name[:1].upper() + name[1:]


def build_text_summary(
    row_count: int,
    columns: ColumnClassification,
    score_card: dict[str, ColumnStats],
    bar_chart: Optional[CategoricalChart] = None,
    pie_chart: Optional[CategoricalChart] = None,
    line_chart: Optional[TimeSeriesChart] = None,
    globe_data: Optional[list[GeoPoint]] = None,
    today: Optional[date] = None,
) -> TextSummary:
    today = today or date.today()
    n_cols = len(columns.numeric) + len(columns.text) + len(columns.date)
    summary = (
        f"This dashboard analyzes {row_count} records across {n_cols} columns "
        f"({len(columns.numeric)} numeric, {len(columns.text)} text, {len(columns.date)} date)."
    )

    findings: list[str] = []
    for name in list(score_card)[:MAX_METRIC_FINDINGS]:
        findings.append(f"Average {metric_label(name)}: {format_metric(name, score_card[name].average)}")

    if bar_chart and bar_chart.labels:
        top = max(range(len(bar_chart.series)), key=lambda i: bar_chart.series[i])
        name = bar_chart.series_name or "value"
        findings.append(
            f"Highest {name}: {bar_chart.labels[top]} ({format_metric(name, bar_chart.series[top])})"
        )

    if pie_chart and pie_chart.labels:
        total = sum(pie_chart.series)
        top = max(range(len(pie_chart.series)), key=lambda i: pie_chart.series[i])
        share = 100.0 * pie_chart.series[top] / total if total else 0.0
        findings.append(
            f"Largest {pie_chart.series_name} group: {pie_chart.labels[top]} "
            f"({pie_chart.series[top]} of {total}, {share:.0f}%)"
        )

    if line_chart and line_chart.labels:
        findings.append(f"Time series spans {line_chart.labels[0]} to {line_chart.labels[-1]}")

    if globe_data:
        findings.append(f"Locations mapped: {len(globe_data)}")

    return TextSummary(
        summary=summary,
        key_findings=findings,
        data_info=f"Dashboard updated: {today.month}/{today.day}/{today.year}",
    )
