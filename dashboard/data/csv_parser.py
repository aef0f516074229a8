"""dashboard.data.csv_parser

Turns CSV text into a list of row dicts.

pandas does the tokenizing (header row, quoting, blank lines). Values are read
as raw strings and typed cell by cell afterwards, so one odd value never turns a
whole numeric column into text:
  - ""            -> None
  - true / false  -> bool
  - 12, -3.5, 1e3 -> int / float
  - anything else -> str (as written)
"""

from __future__ import annotations

import io
import re
from typing import Optional

import pandas as pd

from dashboard.contracts.models import CellValue, Row
from dashboard.contracts.ports import RowParser
from dashboard.errors import DataParseError

_CANDIDATE_DELIMITERS = [",", ";", "\t", "|"]
_NUMBER_RE = re.compile(r"^\s*-?(\d+\.?|\.\d+|\d+\.\d+)([eE][-+]?\d+)?\s*$")
_INT_RE = re.compile(r"^\s*-?\d+\s*$")


def detect_delimiter(text: str) -> str:
    """Pick the candidate delimiter that occurs most often in the header line."""
    header = next((line for line in text.splitlines() if line.strip()), "")
    best = max(_CANDIDATE_DELIMITERS, key=header.count)
    return best if header.count(best) > 0 else ","


def coerce_cell(raw: object) -> CellValue:
    if raw is None:
        return None
    if not isinstance(raw, str):
        # NaN from short rows
        return None if pd.isna(raw) else raw  # type: ignore[return-value]
    if raw == "":
        return None
    low = raw.strip().lower()
    if low == "true":
        return True
    if low == "false":
        return False
    if _NUMBER_RE.match(raw):
        if _INT_RE.match(raw):
            return int(raw)
        return float(raw)
    return raw


def parse_csv_data(text: str, delimiter: Optional[str] = None) -> list[Row]:
    """Parse CSV text (header + data rows) into typed rows.

    Raises:
        DataParseError: the document cannot be tokenized (e.g. a row has more fields than the header).
    """
    if not text or not text.strip():
        return []

    sep = delimiter or detect_delimiter(text)
    try:
        df = pd.read_csv(
            io.StringIO(text),
            sep=sep,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
        )
    except (pd.errors.ParserError, pd.errors.EmptyDataError, ValueError) as e:
        raise DataParseError(f"Malformed CSV: {e}") from e
    if not isinstance(df.index, pd.RangeIndex):
        # every data row had an extra field, pandas took the first column as the index
        raise DataParseError("Malformed CSV: data rows have more fields than the header")

    rows: list[Row] = []
    for record in df.to_dict(orient="records"):
        rows.append({str(k): coerce_cell(v) for k, v in record.items()})
    return rows


class PandasRowParser(RowParser):
    """RowParser backed by pandas.read_csv."""

    def __init__(self, delimiter: Optional[str] = None):
        self.delimiter = delimiter

    def parse(self, text: str) -> list[Row]:
        return parse_csv_data(text, delimiter=self.delimiter)
