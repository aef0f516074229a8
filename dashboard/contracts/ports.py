"""dashboard.contracts.ports

Narrow interfaces for the external capabilities around the chart core:
CSV parsing on the way in, chart rendering on the way out.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any

from .models import Row


class RowParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> list[Row]:
        raise NotImplementedError


class ChartRenderer(ABC):
    @abstractmethod
    def render(self, payload: Any, title: str | None = None) -> Any | None:
        """Return a figure for the payload, or None when there is nothing to draw."""
        raise NotImplementedError
