from datetime import datetime

from dashboard.charts.columns import as_number, classify_columns, format_date, parse_date


def test_classifies_from_first_row():
    rows = [{"name": "Acme", "revenue": 10, "founded": "2024-01-02", "active": True}]
    cols = classify_columns(rows)
    assert cols.numeric == ["revenue"]
    assert cols.text == ["name"]
    assert cols.date == ["founded"]


def test_every_classified_column_lands_in_one_set():
    rows = [{"a": 1, "b": 2.5, "c": "x", "d": "2023-05-06"}]
    cols = classify_columns(rows)
    names = cols.numeric + cols.text + cols.date
    assert sorted(names) == ["a", "b", "c", "d"]
    assert len(names) == len(set(names))


def test_null_first_value_drops_column_with_first_row_strategy():
    rows = [{"a": None, "b": 1}, {"a": 5, "b": 2}]
    cols = classify_columns(rows, strategy="first_row")
    assert cols.numeric == ["b"]
    assert "a" not in cols.text and "a" not in cols.date


def test_first_non_null_strategy_recovers_column():
    rows = [{"a": None, "b": 1, "c": ""}, {"a": 5, "b": 2, "c": "north"}]
    cols = classify_columns(rows, strategy="first_non_null")
    assert cols.numeric == ["a", "b"]
    assert cols.text == ["c"]


def test_empty_string_is_omitted():
    cols = classify_columns([{"a": "", "b": "x"}])
    assert cols.text == ["b"]


def test_empty_rows():
    cols = classify_columns([])
    assert cols.numeric == [] and cols.text == [] and cols.date == []


def test_parse_date_rejects_plain_words():
    assert parse_date("Technology") is None
    assert parse_date(None) is None
    assert parse_date(42) is None


def test_parse_date_accepts_common_formats():
    assert parse_date("2024-01-02") == datetime(2024, 1, 2)
    assert parse_date("2024-01-02T10:00:00Z") == datetime(2024, 1, 2, 10, 0)


def test_format_date_is_us_short():
    assert format_date(datetime(2024, 1, 2)) == "1/2/2024"
    assert format_date(datetime(2023, 11, 25)) == "11/25/2023"


def test_as_number_folds_garbage_to_zero():
    assert as_number(5) == 5
    assert as_number(2.5) == 2.5
    assert as_number("abc") == 0
    assert as_number(None) == 0
    assert as_number(True) == 0
    assert as_number(float("nan")) == 0


def test_parse_date_requires_a_year_or_full_date():
    assert parse_date("March 3") is None
    assert parse_date("3rd") is None
    assert parse_date("Suite 12") is None
    assert parse_date("Jan 5 2024") == datetime(2024, 1, 5)
    assert parse_date("1/2/2024") == datetime(2024, 1, 2)


def test_yearless_first_value_is_text():
    cols = classify_columns([{"when": "March 3", "v": 1}])
    assert cols.text == ["when"]
    assert cols.date == []
