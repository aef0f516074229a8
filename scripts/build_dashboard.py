"""scripts.build_dashboard

Builds the chart bundle for a CSV and prints it (or writes it) as JSON.

Usage:
  python scripts/build_dashboard.py
  python scripts/build_dashboard.py --csv https://example.com/data.csv --out bundle.json
  python scripts/build_dashboard.py --csv data/sample-data.csv --strategy first_non_null --quiet
"""

from __future__ import annotations

import argparse
import dataclasses
import json
from pathlib import Path

from dashboard.config import CLASSIFY_STRATEGIES, Settings
from dashboard.env_loader import load_env
from dashboard.errors import DataLoadError
from dashboard.logging_utils import build_logger
from dashboard.service import load_dashboard


def main(argv: list[str] | None = None) -> int:
    load_env()  # load .env if present
    ap = argparse.ArgumentParser(description="Build dashboard chart data from a CSV file or URL.")
    ap.add_argument("--csv", help="CSV path or URL (overrides DASHBOARD_CSV_SOURCE)")
    ap.add_argument("--strategy", choices=CLASSIFY_STRATEGIES, help="Column classification strategy")
    ap.add_argument("--out", help="Write the JSON bundle to this file")
    ap.add_argument("--quiet", action="store_true", help="Print OK instead of the bundle")
    args = ap.parse_args(argv)

    settings = Settings.load()
    overrides = {}
    if args.csv:
        overrides["csv_source"] = args.csv
    if args.strategy:
        overrides["classify_strategy"] = args.strategy
    if overrides:
        settings = dataclasses.replace(settings, **overrides)

    logger = build_logger(settings.log_dir, level=settings.log_level)
    try:
        bundle = load_dashboard(settings, logger)
    except DataLoadError as e:
        print(f"ERROR: {e}")
        return 1

    payload = bundle.to_dict() if bundle else None
    text = json.dumps(payload, indent=2, default=str)
    if args.out:
        Path(args.out).write_text(text, encoding="utf-8")
    if args.quiet or args.out:
        print("OK")
    else:
        print(text)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
