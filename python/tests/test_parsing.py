import pytest

from rowchain.parsing import Entry, parse_entry, parse_header, parse_integer, strip_whitespace


@pytest.mark.parametrize(
    "token, expected",
    [
        ("123", 123),
        ("-7", -7),
        ("0", 0),
        ("007", 7),
        ("", 0),
        ("-", 0),
        ("abc", 0),
        ("1a", 0),
        ("+3", 0),
        ("--4", 0),
        ("1.5", 0),
    ],
)
def test_parse_integer(token, expected):
    assert parse_integer(token) == expected


def test_strip_whitespace_removes_embedded():
    assert strip_whitespace(" ( 1 ,\t2 , 3 ) \r\n") == "(1,2,3)"
    assert strip_whitespace(" \t \n") == ""


def test_parse_entry_valid():
    assert parse_entry("(1,2,-3)") == Entry(1, 2, -3)
    e = parse_entry("(4,5,6)")
    assert (e.row, e.col, e.value) == (4, 5, 6)


def test_parse_entry_malformed_fields_become_zero():
    assert parse_entry("(1,,abc)") == Entry(1, 0, 0)
    assert parse_entry("(x,2,9)") == Entry(0, 2, 9)


@pytest.mark.parametrize("line", ["(1,2)", "(1,2,3,4)", "rows=3", "(", "()", "1,2,3", "(1,2,3"])
def test_parse_entry_rejects_non_triples(line):
    assert parse_entry(line) is None


def test_parse_header():
    assert parse_header("rows=5", "rows") == 5
    assert parse_header("cols=12", "cols") == 12
    assert parse_header("cols=5", "rows") is None
    assert parse_header("rows=x", "rows") == 0
    assert parse_header("rows=", "rows") == 0
