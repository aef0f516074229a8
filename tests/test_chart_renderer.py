import matplotlib

matplotlib.use("Agg")

from dashboard.charts.aggregations import (  # noqa: E402
    prepare_bar_chart,
    prepare_globe_data,
    prepare_horizontal_bar_chart,
    prepare_line_chart,
    prepare_pie_chart,
    prepare_scatter_chart,
)
from dashboard.contracts.models import CategoricalChart, ScatterChart  # noqa: E402
from dashboard.viz.chart_renderer import (  # noqa: E402
    MatplotlibChartRenderer,
    PlotlyChartRenderer,
    get_renderer,
    render_chart,
)

ROWS = [
    {"cat": "A", "val": 3, "other": 1, "d": "2024-01-02", "latitude": 1.0, "longitude": 2.0, "name": "HQ"},
    {"cat": "B", "val": 5, "other": 2, "d": "2024-01-01", "latitude": 3.0, "longitude": 4.0, "name": "Branch"},
]


def test_missing_payloads_render_nothing():
    assert render_chart(None) is None
    assert render_chart([]) is None
    assert render_chart(CategoricalChart(kind="bar", labels=[], series=[])) is None
    assert render_chart(ScatterChart(points=[], series_name="y vs x", x_column="x", y_column="y")) is None


def test_unknown_library_renders_nothing():
    assert render_chart(prepare_bar_chart(ROWS, "cat", "val"), library="bokeh") is None


def test_plotly_figures_for_each_kind():
    payloads = [
        prepare_bar_chart(ROWS, "cat", "val"),
        prepare_horizontal_bar_chart(ROWS, "cat", "other"),
        prepare_pie_chart(ROWS, "cat"),
        prepare_line_chart(ROWS, "d", "val"),
        prepare_scatter_chart(ROWS, "val", "other"),
        prepare_globe_data(ROWS),
    ]
    for payload in payloads:
        fig = PlotlyChartRenderer().render(payload, title="t")
        assert fig is not None
        assert hasattr(fig, "to_dict")
        assert len(fig.data) == 1


def test_matplotlib_fallback():
    import matplotlib.pyplot as plt

    fig = MatplotlibChartRenderer().render(prepare_bar_chart(ROWS, "cat", "val"), title="Revenue")
    assert fig is not None
    assert fig.axes[0].get_title() == "Revenue"
    plt.close(fig)


def test_get_renderer():
    assert isinstance(get_renderer("matplotlib"), MatplotlibChartRenderer)
    assert isinstance(get_renderer("plotly"), PlotlyChartRenderer)
