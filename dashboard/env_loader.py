"""dashboard.env_loader

Loads DASHBOARD_* / LOG_* settings from a .env file using python-dotenv.

The CLI and the Streamlit page may be started from any working directory, so
the file is searched upward from the CWD. Already-set environment variables win
unless `override=True`.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def _find_dotenv(start: Path, max_levels: int = 6) -> Optional[Path]:
    """Search upward for a .env file starting from `start`."""
    cur = start.resolve()
    for _ in range(max_levels + 1):
        candidate = cur / ".env"
        if candidate.is_file():
            return candidate
        if cur.parent == cur:
            break
        cur = cur.parent
    return None


def load_env(dotenv_path: str | None = None, override: bool = False) -> str | None:
    """Load dashboard env vars from .env.

    Args:
        dotenv_path: Explicit path to a .env file. Searched upward from CWD when omitted.
        override: Let values in .env replace variables already set in the process.

    Returns:
        The .env path used, or None if no file was found.
    """
    if dotenv_path:
        path: Optional[Path] = Path(dotenv_path).expanduser()
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    load_dotenv(dotenv_path=str(path), override=override)
    return str(path)
