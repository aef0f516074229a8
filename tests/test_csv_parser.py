import pytest

from dashboard.data.csv_parser import PandasRowParser, coerce_cell, detect_delimiter, parse_csv_data
from dashboard.errors import DataParseError


def test_parses_with_dynamic_typing():
    text = "name,revenue,ratio,active,founded,note\nAcme,1200,0.5,true,2020-01-01,\nGlobex,n/a,1e3,FALSE,2019-05-05,hi\n"
    rows = parse_csv_data(text)
    assert rows[0] == {
        "name": "Acme", "revenue": 1200, "ratio": 0.5, "active": True, "founded": "2020-01-01", "note": None,
    }
    assert rows[1]["revenue"] == "n/a"
    assert rows[1]["ratio"] == 1000.0
    assert rows[1]["active"] is False
    assert isinstance(rows[0]["revenue"], int)


def test_skips_blank_lines():
    rows = parse_csv_data("a,b\n1,2\n\n3,4\n")
    assert rows == [{"a": 1, "b": 2}, {"a": 3, "b": 4}]


def test_empty_text_gives_no_rows():
    assert parse_csv_data("") == []
    assert parse_csv_data("   \n") == []
    assert parse_csv_data("a,b\n") == []


def test_short_rows_fill_with_none():
    rows = parse_csv_data("a,b,c\n1,2\n")
    assert rows == [{"a": 1, "b": 2, "c": None}]


def test_ragged_row_raises():
    with pytest.raises(DataParseError):
        parse_csv_data("a,b\n1,2\n3,4,5,6\n")


def test_extra_field_on_every_row_raises():
    with pytest.raises(DataParseError):
        parse_csv_data("cat,val\nA,10,99\nB,3,77\n")


def test_detects_semicolon_and_tab():
    assert detect_delimiter("a;b;c\n1;2;3") == ";"
    assert detect_delimiter("a\tb\n1\t2") == "\t"
    assert detect_delimiter("single\n1") == ","
    rows = parse_csv_data("city;revenue\nOslo;10\n")
    assert rows == [{"city": "Oslo", "revenue": 10}]


def test_quoted_fields_keep_commas():
    rows = parse_csv_data('name,revenue\n"Acme, Inc.",5\n')
    assert rows[0]["name"] == "Acme, Inc."


def test_coerce_cell():
    assert coerce_cell("") is None
    assert coerce_cell("-3") == -3
    assert coerce_cell(".5") == 0.5
    assert coerce_cell("12abc") == "12abc"
    assert coerce_cell(float("nan")) is None


def test_parser_port_uses_forced_delimiter():
    rows = PandasRowParser(delimiter="|").parse("a|b\nx,y|2\n")
    assert rows == [{"a": "x,y", "b": 2}]
