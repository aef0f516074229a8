"""dashboard.charts.aggregations

One pure function per chart kind, plus `process_data_for_charts` which picks
columns from the classification and assembles the ChartBundle.

Each function returns None when a column it needs was not inferred; the UI
shows a placeholder for that chart instead of failing the whole dashboard.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from dashboard.charts import palette
from dashboard.charts.columns import (
    as_number,
    classify_columns,
    format_date,
    is_missing,
    is_number,
    parse_date,
)
from dashboard.charts.summary import build_text_summary
from dashboard.contracts.models import (
    CategoricalChart,
    ChartBundle,
    ColumnStats,
    GeoPoint,
    Point,
    Row,
    ScatterChart,
    TimeSeriesChart,
)


def _first_truthy(*values: Any, default: Any) -> Any:
    for v in values:
        if v:
            return v
    return default


def _sum_by_label(rows: list[Row], label_col: str, value_col: str) -> tuple[list[Any], list[float]]:
    totals: dict[Any, float] = {}
    for row in rows:
        label = row.get(label_col)
        if label is None:
            continue
        # non-numeric strings count as 0, the row still creates its group
        totals[label] = totals.get(label, 0) + as_number(row.get(value_col))
    return list(totals.keys()), list(totals.values())


def prepare_bar_chart(rows: list[Row], label_col: Optional[str], value_col: Optional[str]) -> Optional[CategoricalChart]:
    if not label_col or not value_col:
        return None
    labels, series = _sum_by_label(rows, label_col, value_col)
    return CategoricalChart(kind="bar", labels=labels, series=series, series_name=value_col, style=palette.BAR_STYLE)


def prepare_horizontal_bar_chart(
    rows: list[Row], label_col: Optional[str], value_col: Optional[str]
) -> Optional[CategoricalChart]:
    if not label_col or not value_col:
        return None
    labels, series = _sum_by_label(rows, label_col, value_col)
    return CategoricalChart(
        kind="horizontal_bar", labels=labels, series=series, series_name=value_col, style=palette.HORIZONTAL_BAR_STYLE
    )


def prepare_pie_chart(rows: list[Row], category_col: Optional[str]) -> Optional[CategoricalChart]:
    if not category_col:
        return None
    counts: dict[Any, int] = {}
    for row in rows:
        category = row.get(category_col)
        if category is None:
            continue
        counts[category] = counts.get(category, 0) + 1
    return CategoricalChart(
        kind="pie", labels=list(counts.keys()), series=list(counts.values()), series_name=category_col, style=palette.PIE_STYLE
    )


def prepare_line_chart(rows: list[Row], date_col: Optional[str], value_col: Optional[str]) -> Optional[TimeSeriesChart]:
    if not date_col or not value_col:
        return None
    dated = []
    for row in rows:
        value = row.get(value_col)
        if not is_number(value):
            continue
        when = parse_date(row.get(date_col))
        if when is None:
            continue
        dated.append((when, value))
    dated.sort(key=lambda pair: pair[0])
    return TimeSeriesChart(
        labels=[format_date(when) for when, _ in dated],
        series=[value for _, value in dated],
        series_name=value_col,
        style=palette.LINE_STYLE,
    )


def prepare_scatter_chart(rows: list[Row], x_col: Optional[str], y_col: Optional[str]) -> Optional[ScatterChart]:
    if not x_col or not y_col:
        return None
    points = [
        Point(x=row.get(x_col), y=row.get(y_col))
        for row in rows
        if row.get(x_col) is not None and row.get(y_col) is not None
    ]
    return ScatterChart(
        points=points, series_name=f"{y_col} vs {x_col}", x_column=x_col, y_column=y_col, style=palette.SCATTER_STYLE
    )


def prepare_globe_data(rows: list[Row]) -> list[GeoPoint]:
    out: list[GeoPoint] = []
    for row in rows:
        lat, lng = row.get("latitude"), row.get("longitude")
        if is_missing(lat) or is_missing(lng):
            continue
        value = _first_truthy(row.get("revenue"), row.get("score"), default=1)
        out.append(
            GeoPoint(
                lat=lat,
                lng=lng,
                label=_first_truthy(row.get("name"), row.get("city"), default="Location"),
                value=value,
                color=palette.color_by_value(as_number(value)),
            )
        )
    return out


def prepare_score_card(rows: list[Row], numeric_cols: list[str]) -> dict[str, ColumnStats]:
    metrics: dict[str, ColumnStats] = {}
    for col in numeric_cols:
        values = [row.get(col) for row in rows if is_number(row.get(col))]
        if not values:
            continue
        total = sum(values)
        metrics[col] = ColumnStats(
            average=total / len(values),
            total=total,
            count=len(values),
            max=max(values),
            min=min(values),
        )
    return metrics


def process_data_for_charts(
    rows: list[Row], strategy: str = "first_row", today: Optional[date] = None
) -> Optional[ChartBundle]:
    """Build every dashboard payload from one table; None for an empty table."""
    if not rows:
        return None

    columns = classify_columns(rows, strategy=strategy)
    numeric, text, dates = columns.numeric, columns.text, columns.date

    def pick(cols: list[str], i: int) -> Optional[str]:
        return cols[i] if len(cols) > i else None

    bar = prepare_bar_chart(rows, pick(text, 0), pick(numeric, 0))
    pie = prepare_pie_chart(rows, pick(text, 1) or pick(text, 0))
    line = prepare_line_chart(rows, pick(dates, 0), pick(numeric, 0))
    scatter = prepare_scatter_chart(rows, pick(numeric, 0), pick(numeric, 1))
    globe = prepare_globe_data(rows)
    score_card = prepare_score_card(rows, numeric)
    hbar = prepare_horizontal_bar_chart(rows, pick(text, 0), pick(numeric, 1) or pick(numeric, 0))

    summary = build_text_summary(
        row_count=len(rows),
        columns=columns,
        score_card=score_card,
        bar_chart=bar,
        pie_chart=pie,
        line_chart=line,
        globe_data=globe,
        today=today,
    )

    return ChartBundle(
        columns=columns,
        row_count=len(rows),
        bar_chart=bar,
        horizontal_bar_chart=hbar,
        pie_chart=pie,
        line_chart=line,
        scatter_chart=scatter,
        globe_data=globe,
        score_card=score_card,
        text_summary=summary,
    )
