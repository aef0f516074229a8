"""dashboard.viz.chart_renderer

Chart rendering for the dashboard payloads.

- Plotly is preferred (interactive, used by the Streamlit page).
- Matplotlib is supported as a fallback (static export).

Score cards and the text summary are laid out by the UI, not drawn here.
"""

from __future__ import annotations

import re
from typing import Any

from dashboard.contracts.models import CategoricalChart, GeoPoint, ScatterChart, TimeSeriesChart
from dashboard.contracts.ports import ChartRenderer


def _is_empty(payload: Any) -> bool:
    if payload is None:
        return True
    if isinstance(payload, list):
        return len(payload) == 0
    if isinstance(payload, ScatterChart):
        return not payload.points
    if isinstance(payload, (CategoricalChart, TimeSeriesChart)):
        return not payload.labels
    return False


def _single_color(color: Any) -> str | None:
    return color if isinstance(color, str) else None


_RGBA_RE = re.compile(r"rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*([\d.]+)\s*)?\)")


def _mpl_color(color: Any) -> Any:
    """Matplotlib wants tuples, not CSS rgba() strings."""
    if not isinstance(color, str):
        return None
    m = _RGBA_RE.fullmatch(color.strip())
    if not m:
        return color
    r, g, b, a = m.groups()
    return (int(r) / 255, int(g) / 255, int(b) / 255, float(a) if a is not None else 1.0)


def render_chart(payload: Any, library: str = "plotly", title: str | None = None) -> Any | None:
    """Render a chart payload and return a Plotly or Matplotlib figure (None when nothing to draw)."""
    if _is_empty(payload):
        return None

    lib = (library or "plotly").lower()

    if lib == "plotly":
        import plotly.express as px
        import plotly.graph_objects as go

        if isinstance(payload, CategoricalChart):
            labels = [str(v) for v in payload.labels]
            if payload.kind == "pie":
                colors = payload.style.background_color
                return px.pie(
                    names=labels,
                    values=payload.series,
                    title=title,
                    color_discrete_sequence=colors if isinstance(colors, list) else None,
                )
            color = _single_color(payload.style.background_color)
            if payload.kind == "horizontal_bar":
                fig = px.bar(x=payload.series, y=labels, orientation="h", title=title,
                             labels={"x": payload.series_name, "y": ""})
            else:
                fig = px.bar(x=labels, y=payload.series, title=title,
                             labels={"x": "", "y": payload.series_name})
            if color:
                fig.update_traces(marker_color=color)
            return fig

        if isinstance(payload, TimeSeriesChart):
            fig = px.line(x=payload.labels, y=payload.series, title=title,
                          labels={"x": "", "y": payload.series_name})
            if _single_color(payload.style.border_color):
                fig.update_traces(line_color=payload.style.border_color)
            return fig

        if isinstance(payload, ScatterChart):
            fig = px.scatter(
                x=[p.x for p in payload.points],
                y=[p.y for p in payload.points],
                title=title or payload.series_name,
                labels={"x": payload.x_column, "y": payload.y_column},
            )
            if _single_color(payload.style.background_color):
                fig.update_traces(marker_color=payload.style.background_color)
            return fig

        if isinstance(payload, list) and all(isinstance(p, GeoPoint) for p in payload):
            fig = go.Figure(
                go.Scattergeo(
                    lat=[p.lat for p in payload],
                    lon=[p.lng for p in payload],
                    text=[f"{p.label}: {p.value}" for p in payload],
                    marker={"color": [p.color for p in payload], "size": 8},
                    mode="markers",
                )
            )
            fig.update_geos(projection_type="orthographic")
            if title:
                fig.update_layout(title=title)
            return fig

        return None

    if lib == "matplotlib":
        import matplotlib.pyplot as plt

        fig = plt.figure()
        ax = fig.add_subplot(111)

        if isinstance(payload, CategoricalChart):
            labels = [str(v) for v in payload.labels]
            if payload.kind == "pie":
                colors = payload.style.background_color
                ax.pie(payload.series, labels=labels, colors=colors if isinstance(colors, list) else None)
            elif payload.kind == "horizontal_bar":
                ax.barh(labels, payload.series, color=_mpl_color(payload.style.border_color))
                ax.set_xlabel(str(payload.series_name))
            else:
                ax.bar(labels, payload.series, color=_mpl_color(payload.style.border_color))
                ax.set_ylabel(str(payload.series_name))

        elif isinstance(payload, TimeSeriesChart):
            ax.plot(payload.labels, payload.series, color=_mpl_color(payload.style.border_color))
            ax.set_ylabel(payload.series_name)

        elif isinstance(payload, ScatterChart):
            ax.scatter([p.x for p in payload.points], [p.y for p in payload.points],
                       color=_mpl_color(payload.style.border_color))
            ax.set_xlabel(payload.x_column)
            ax.set_ylabel(payload.y_column)

        elif isinstance(payload, list) and all(isinstance(p, GeoPoint) for p in payload):
            ax.scatter([p.lng for p in payload], [p.lat for p in payload], c=[p.color for p in payload])
            ax.set_xlabel("longitude")
            ax.set_ylabel("latitude")

        else:
            plt.close(fig)
            return None

        if title:
            ax.set_title(title)
        fig.tight_layout()
        return fig

    return None


class PlotlyChartRenderer(ChartRenderer):
    def render(self, payload: Any, title: str | None = None) -> Any | None:
        return render_chart(payload, library="plotly", title=title)


class MatplotlibChartRenderer(ChartRenderer):
    def render(self, payload: Any, title: str | None = None) -> Any | None:
        return render_chart(payload, library="matplotlib", title=title)


def get_renderer(library: str) -> ChartRenderer:
    if (library or "").lower() == "matplotlib":
        return MatplotlibChartRenderer()
    return PlotlyChartRenderer()
