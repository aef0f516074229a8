"""dashboard.data.csv_source

Fetches the dashboard CSV and hands it to the row parser.

Sources:
  - http(s) URL  -> one GET through httpx.AsyncClient
  - anything else -> local file, relative paths resolved against the data dir

A single awaited fetch, no retries. Any failure surfaces as one DataLoadError.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import httpx

from dashboard.contracts.models import Row
from dashboard.contracts.ports import RowParser
from dashboard.data.csv_parser import PandasRowParser
from dashboard.errors import DataLoadError
from dashboard.paths import resolve_source


def is_url(source: str) -> bool:
    return source.lower().startswith(("http://", "https://"))


async def fetch_csv_text(
    source: str,
    base_dir: str | Path | None = None,
    timeout: float = 30.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Return the raw CSV text for `source`."""
    if is_url(source):
        async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
            response = await client.get(source)
            response.raise_for_status()
            return response.text

    path = resolve_source(source, base_dir)
    # utf-8-sig drops the BOM spreadsheet exports tend to add
    return await asyncio.to_thread(path.read_text, encoding="utf-8-sig")


async def load_csv_file(
    source: str,
    parser: Optional[RowParser] = None,
    base_dir: str | Path | None = None,
    timeout: float = 30.0,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> list[Row]:
    """Fetch and parse a CSV source into rows."""
    parser = parser or PandasRowParser()
    try:
        text = await fetch_csv_text(source, base_dir=base_dir, timeout=timeout, transport=transport)
        return parser.parse(text)
    except DataLoadError as e:
        raise type(e)(f"Failed to load CSV file: {e}") from e
    except Exception as e:
        raise DataLoadError(f"Failed to load CSV file: {e}") from e
