"""dashboard.paths

Helpers for resolving file system paths consistently (Streamlit can run from different CWDs).
"""

from __future__ import annotations
from pathlib import Path


def project_root() -> Path:
    """Return the repository root folder (parent of `dashboard/`)."""
    return Path(__file__).resolve().parents[1]


def data_dir() -> Path:
    """Return the default data directory holding the sample CSV."""
    return project_root() / "data"


def resolve_source(source: str, base_dir: str | Path | None = None) -> Path:
    """Resolve a local CSV source; relative paths are taken from `base_dir` (default: data dir)."""
    p = Path(source).expanduser()
    if p.is_absolute():
        return p
    base = Path(base_dir).expanduser() if base_dir else data_dir()
    return (base / p).resolve()
