"""dashboard.service

Wiring for loader + parser + chart aggregations.

load -> parse -> classify -> aggregate. Either the whole bundle is produced or
a single DataLoadError is raised; a chart with no usable columns is just None.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from dashboard.charts.aggregations import process_data_for_charts
from dashboard.config import Settings
from dashboard.contracts.models import ChartBundle
from dashboard.data.csv_parser import PandasRowParser
from dashboard.data.csv_source import load_csv_file
from dashboard.errors import DataLoadError


async def build_dashboard(
    settings: Settings,
    logger: logging.Logger,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Optional[ChartBundle]:
    parser = PandasRowParser(delimiter=settings.csv_delimiter)
    try:
        rows = await load_csv_file(
            settings.csv_source,
            parser=parser,
            base_dir=settings.data_dir,
            timeout=settings.fetch_timeout_seconds,
            transport=transport,
        )
    except DataLoadError as e:
        logger.error(f"Dashboard data loading error for source={settings.csv_source}: {e}")
        raise

    logger.info(f"Loaded {len(rows)} rows from {settings.csv_source}")
    bundle = process_data_for_charts(rows, strategy=settings.classify_strategy)
    if bundle is None:
        logger.warning(f"No rows in {settings.csv_source}; nothing to chart")
        return None

    cols = bundle.columns
    logger.info(f"Columns numeric={cols.numeric} text={cols.text} date={cols.date} (strategy={settings.classify_strategy})")
    missing = [
        name
        for name, chart in (
            ("bar", bundle.bar_chart),
            ("horizontal_bar", bundle.horizontal_bar_chart),
            ("pie", bundle.pie_chart),
            ("line", bundle.line_chart),
            ("scatter", bundle.scatter_chart),
        )
        if chart is None
    ]
    if missing:
        logger.info(f"Charts without usable columns: {missing}")
    return bundle


def load_dashboard(settings: Settings, logger: logging.Logger) -> Optional[ChartBundle]:
    """Synchronous entry point for the CLI and Streamlit."""
    return asyncio.run(build_dashboard(settings, logger))
