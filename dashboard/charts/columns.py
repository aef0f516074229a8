"""dashboard.charts.columns

Column type inference and the value helpers shared by the aggregations.

Classification looks at one value per column:
  - int/float (not bool)            -> numeric
  - string that parses as a date    -> date
  - any other non-empty string      -> text
  - None / empty / anything else    -> omitted from all three sets

`first_row` only inspects rows[0], so a blank first value drops the column for
the whole table. `first_non_null` inspects the first usable value per column.
"""

from __future__ import annotations

import math
import re
import warnings
from datetime import date, datetime
from typing import Any, Iterable, Optional

import pandas as pd

from dashboard.contracts.models import ColumnClassification, Row

# a four-digit year, or day/month/year written with separators
_DATE_SHAPE = re.compile(r"(?<!\d)\d{4}(?!\d)|\d{1,2}[-/.]\d{1,2}[-/.]\d{2,4}")


def is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, float) and math.isnan(value):
        return True
    return isinstance(value, str) and not value.strip()


def is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return not math.isnan(value)
    return isinstance(value, int)


def as_number(value: Any) -> float:
    """Numeric value, or 0 for anything missing or non-numeric."""
    return value if is_number(value) else 0


def parse_date(value: Any) -> Optional[datetime]:
    """Parse a calendar date; None when the value is not one."""
    if isinstance(value, datetime):
        return value.replace(tzinfo=None)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str) or not _DATE_SHAPE.search(value):
        return None
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        ts = pd.to_datetime(value.strip(), errors="coerce")
    if ts is None or pd.isna(ts):
        return None
    if ts.tzinfo is not None:
        ts = ts.tz_localize(None)
    return ts.to_pydatetime()


def format_date(d: datetime) -> str:
    """US short date without zero padding, e.g. 1/2/2024."""
    return f"{d.month}/{d.day}/{d.year}"


def classify_value(value: Any) -> Optional[str]:
    if is_number(value):
        return "numeric"
    if isinstance(value, str) and not is_missing(value):
        return "date" if parse_date(value) is not None else "text"
    return None


def _column_order(rows: Iterable[Row]) -> list[str]:
    seen: dict[str, None] = {}
    for row in rows:
        for key in row:
            seen.setdefault(key, None)
    return list(seen)


def classify_columns(rows: list[Row], strategy: str = "first_row") -> ColumnClassification:
    numeric: list[str] = []
    text: list[str] = []
    date_cols: list[str] = []
    if not rows:
        return ColumnClassification()

    buckets = {"numeric": numeric, "text": text, "date": date_cols}

    if strategy == "first_row":
        for key, value in rows[0].items():
            kind = classify_value(value)
            if kind:
                buckets[kind].append(key)
    elif strategy == "first_non_null":
        for key in _column_order(rows):
            value = next((r.get(key) for r in rows if not is_missing(r.get(key))), None)
            kind = classify_value(value)
            if kind:
                buckets[kind].append(key)
    else:
        raise ValueError(f"Unknown classify strategy: {strategy}")

    return ColumnClassification(numeric=numeric, text=text, date=date_cols)
