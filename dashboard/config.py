"""dashboard.config

Centralized configuration for the dashboard.

Uses environment variables (optionally from a .env file, see env_loader).
Settings are passed explicitly to the service; nothing reads them globally.
"""

from __future__ import annotations
from dataclasses import dataclass
import os

from dashboard.errors import ConfigError
from dashboard.paths import data_dir

CLASSIFY_STRATEGIES = ("first_row", "first_non_null")
CHART_LIBRARIES = ("plotly", "matplotlib")


def _env(name: str, default: str | None = None) -> str | None:
    val = os.getenv(name)
    return val if val is not None else default


def _env_bool(name: str, default: bool = False) -> bool:
    v = os.getenv(name)
    if v is None:
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_float(name: str, default: float) -> float:
    v = os.getenv(name)
    if v is None:
        return default
    try:
        return float(v)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Dashboard settings loaded from environment variables."""

    # Data source
    csv_source: str  # path (relative to data_dir) or http(s) URL
    data_dir: str
    csv_delimiter: str | None  # None = auto-detect
    fetch_timeout_seconds: float

    # Processing
    classify_strategy: str  # first_row|first_non_null

    # Rendering
    chart_library: str  # plotly|matplotlib
    show_debug: bool

    # Logging
    log_dir: str
    log_level: str

    def __post_init__(self) -> None:
        if self.classify_strategy not in CLASSIFY_STRATEGIES:
            raise ConfigError(
                f"Invalid DASHBOARD_CLASSIFY_STRATEGY={self.classify_strategy!r}; expected one of {CLASSIFY_STRATEGIES}"
            )
        if self.chart_library not in CHART_LIBRARIES:
            raise ConfigError(
                f"Invalid DASHBOARD_CHART_LIBRARY={self.chart_library!r}; expected one of {CHART_LIBRARIES}"
            )
        if not self.csv_source:
            raise ConfigError("DASHBOARD_CSV_SOURCE must not be empty")

    @staticmethod
    def load() -> "Settings":
        delimiter = _env("DASHBOARD_CSV_DELIMITER")
        if delimiter is not None and delimiter.lower() in ("tab", "\\t"):
            delimiter = "\t"
        return Settings(
            csv_source=(_env("DASHBOARD_CSV_SOURCE", "sample-data.csv") or "").strip(),
            data_dir=_env("DASHBOARD_DATA_DIR", str(data_dir())) or str(data_dir()),
            csv_delimiter=delimiter or None,
            fetch_timeout_seconds=_env_float("DASHBOARD_FETCH_TIMEOUT_SECONDS", 30.0),
            classify_strategy=(_env("DASHBOARD_CLASSIFY_STRATEGY", "first_row") or "first_row").strip().lower(),
            chart_library=(_env("DASHBOARD_CHART_LIBRARY", "plotly") or "plotly").strip().lower(),
            show_debug=_env_bool("DASHBOARD_SHOW_DEBUG", False),
            log_dir=_env("LOG_DIR", "logs") or "logs",
            log_level=(_env("LOG_LEVEL", "INFO") or "INFO").strip().upper(),
        )
