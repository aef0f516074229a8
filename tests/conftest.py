import pytest

from dashboard.config import Settings


@pytest.fixture
def make_settings(tmp_path):
    def _make(**overrides) -> Settings:
        values = dict(
            csv_source="sample-data.csv",
            data_dir=str(tmp_path),
            csv_delimiter=None,
            fetch_timeout_seconds=5.0,
            classify_strategy="first_row",
            chart_library="plotly",
            show_debug=False,
            log_dir=str(tmp_path / "logs"),
            log_level="INFO",
        )
        values.update(overrides)
        return Settings(**values)

    return _make
