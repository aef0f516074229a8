"""ui.streamlit_app

Streamlit dashboard page:
- Score cards + executive summary
- Bar / horizontal bar, pie / line, globe / scatter grid
- Placeholder when a chart has no usable columns
- Error message with Retry when the CSV cannot be loaded
"""

from __future__ import annotations

import dataclasses
import json

import streamlit as st

from dashboard.charts.summary import format_metric, metric_label
from dashboard.config import Settings
from dashboard.env_loader import load_env
from dashboard.errors import DataLoadError
from dashboard.logging_utils import build_logger
from dashboard.service import load_dashboard
from dashboard.viz.chart_renderer import render_chart
from ui.ui_theme import css, placeholder

MAX_SCORE_CARDS = 4


@st.cache_data(show_spinner=False)
def _load_bundle(settings: Settings):
    logger = build_logger(settings.log_dir, level=settings.log_level)
    return load_dashboard(settings, logger)


def _show_chart(payload, title: str, library: str) -> None:
    fig = render_chart(payload, library=library, title=title)
    if fig is None:
        st.markdown(placeholder(title), unsafe_allow_html=True)
    elif hasattr(fig, "to_dict"):
        st.plotly_chart(fig, width="stretch")
    else:
        st.pyplot(fig, clear_figure=False)


def _show_score_cards(score_card) -> None:
    st.markdown("#### Key Performance Metrics")
    if not score_card:
        st.markdown(placeholder("", "No data available for score card"), unsafe_allow_html=True)
        return
    keys = list(score_card)[:MAX_SCORE_CARDS]
    cols = st.columns(len(keys))
    for col, key in zip(cols, keys):
        m = score_card[key]
        col.metric(metric_label(key), format_metric(key, m.average), help="Average")
        col.caption(f"Total: {format_metric(key, m.total)} · Count: {m.count}")


def _show_summary(summary) -> None:
    st.markdown("#### Executive Summary")
    if summary is None:
        return
    st.markdown(summary.summary)
    if summary.key_findings:
        st.markdown("\n".join(f"- {f}" for f in summary.key_findings))
    st.caption(summary.data_info)


def main():
    load_env()
    settings = Settings.load()

    st.set_page_config(page_title="Data Dashboard", page_icon="📊", layout="wide")
    st.markdown(css(), unsafe_allow_html=True)
    st.markdown(
        "<div class='dash-header'><h1>Data Dashboard</h1>"
        "<span class='dash-muted'>Interactive visualization of business metrics and analytics</span></div>",
        unsafe_allow_html=True,
    )

    with st.sidebar:
        st.markdown("### Data")
        source = st.text_input("CSV path or URL", value=settings.csv_source)
        strategy = st.selectbox(
            "Column detection",
            options=["first_row", "first_non_null"],
            index=0 if settings.classify_strategy == "first_row" else 1,
        )
        library = st.selectbox(
            "Chart library",
            options=["plotly", "matplotlib"],
            index=0 if settings.chart_library == "plotly" else 1,
        )
        settings = dataclasses.replace(
            settings, csv_source=source.strip() or settings.csv_source, classify_strategy=strategy, chart_library=library
        )

    with st.spinner("Loading dashboard data..."):
        try:
            bundle = _load_bundle(settings)
        except DataLoadError as e:
            st.error(f"Failed to load dashboard data: {e}")
            if st.button("Retry"):
                _load_bundle.clear()
                st.rerun()
            return

    if bundle is None:
        st.info("The CSV file has no data rows.")
        return

    c1, c2 = st.columns(2)
    with c1:
        _show_score_cards(bundle.score_card)
    with c2:
        _show_summary(bundle.text_summary)

    c1, c2 = st.columns(2)
    with c1:
        _show_chart(bundle.bar_chart, "Revenue by Category", library)
    with c2:
        _show_chart(bundle.horizontal_bar_chart, "Profit Analysis", library)

    c1, c2 = st.columns(2)
    with c1:
        _show_chart(bundle.pie_chart, "Industry Distribution", library)
    with c2:
        _show_chart(bundle.line_chart, "Revenue Trend Over Time", library)

    c1, c2 = st.columns(2)
    with c1:
        _show_chart(bundle.globe_data, "Global Business Locations", library)
    with c2:
        _show_chart(bundle.scatter_chart, "Revenue vs Profit Correlation", library)

    if settings.show_debug:
        with st.expander("Chart bundle (JSON)", expanded=False):
            st.code(json.dumps(bundle.to_dict(), indent=2, default=str), language="json")


if __name__ == "__main__":
    main()
