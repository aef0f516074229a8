"""dashboard.contracts.models

Shared models for the loader, the chart aggregations, the renderer and the UI.

All payloads are immutable snapshots of one input table; they are rebuilt on
every load and never persisted.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, field
from typing import Any, Optional, Union

CellValue = Union[str, int, float, bool, None]
Row = dict[str, CellValue]


@dataclass(frozen=True)
class ColumnClassification:
    """Column names split by inferred type, in header order."""
    numeric: list[str] = field(default_factory=list)
    text: list[str] = field(default_factory=list)
    date: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ChartStyle:
    """Presentation hints carried with a chart payload."""
    background_color: str | list[str] | None = None
    border_color: Optional[str] = None
    border_width: Optional[int] = None
    tension: Optional[float] = None


@dataclass(frozen=True)
class CategoricalChart:
    """Bar / horizontal-bar / pie payload."""
    kind: str  # bar|horizontal_bar|pie
    labels: list[Any]
    series: list[float]
    series_name: Optional[str] = None
    style: ChartStyle = field(default_factory=ChartStyle)


@dataclass(frozen=True)
class TimeSeriesChart:
    """Line chart payload; labels are M/D/YYYY strings sorted by date."""
    labels: list[str]
    series: list[Any]
    series_name: str
    style: ChartStyle = field(default_factory=ChartStyle)
    kind: str = "line"


@dataclass(frozen=True)
class Point:
    x: Any
    y: Any


@dataclass(frozen=True)
class ScatterChart:
    points: list[Point]
    series_name: str
    x_column: str
    y_column: str
    style: ChartStyle = field(default_factory=ChartStyle)
    kind: str = "scatter"


@dataclass(frozen=True)
class GeoPoint:
    lat: Any
    lng: Any
    label: Any
    value: Any
    color: str


@dataclass(frozen=True)
class ColumnStats:
    average: float
    total: float
    count: int
    max: float
    min: float


@dataclass(frozen=True)
class TextSummary:
    """Executive summary block shown next to the score cards."""
    summary: str
    key_findings: list[str]
    data_info: str


@dataclass(frozen=True)
class ChartBundle:
    """Everything the dashboard renders for one CSV load."""
    columns: ColumnClassification
    row_count: int
    bar_chart: Optional[CategoricalChart] = None
    horizontal_bar_chart: Optional[CategoricalChart] = None
    pie_chart: Optional[CategoricalChart] = None
    line_chart: Optional[TimeSeriesChart] = None
    scatter_chart: Optional[ScatterChart] = None
    globe_data: list[GeoPoint] = field(default_factory=list)
    score_card: dict[str, ColumnStats] = field(default_factory=dict)
    text_summary: Optional[TextSummary] = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping (None charts stay None)."""
        return asdict(self)
