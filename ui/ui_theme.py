"""ui.ui_theme

Central place for dashboard theme constants and CSS.
"""

ACCENT_BLUE = "#36A2EB"


def css() -> str:
    return f"""
    <style>
    .dash-header {{
        border-bottom: 2px solid {ACCENT_BLUE};
        padding: 8px 12px;
        margin-bottom: 12px;
    }}
    .dash-muted {{
        color: #4b4b4b;
        font-size: 13px;
    }}
    .chart-placeholder {{
        border: 1px dashed #c9cbcf;
        border-radius: 8px;
        padding: 32px 12px;
        text-align: center;
        color: #8a8a8a;
    }}
    </style>
    """


def placeholder(title: str, message: str = "No data available for this chart") -> str:
    return f"<h4>{title}</h4><div class='chart-placeholder'>{message}</div>"
