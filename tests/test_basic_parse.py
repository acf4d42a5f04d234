from __future__ import annotations

from pathlib import Path

import pytest

from ptcr import (
    ColumnRange,
    File,
    Line,
    LineRange,
    MalformedSpanError,
    MultiLine,
    NumericOverflowError,
    ParseError,
    Point,
    Record,
    SourceReadError,
    parse,
    parse_file,
)


def test_single_record() -> None:
    recs = parse("src/main.rs:1\nhello")
    assert recs == [Record(path="src/main.rs", span=Line(1), body=["hello"])]


@pytest.mark.parametrize(
    ("header", "span"),
    [
        ("f.rs:*", File()),
        ("f.rs:7", Line(7)),
        ("f.rs:7.3", Point(line=7, col=3)),
        ("f.rs:4-9", LineRange(start=4, end=9)),
        ("f.rs:2.3-2.9", ColumnRange(line=2, start_col=3, end_col=9)),
        ("f.rs:2.3-5.1", MultiLine(start_line=2, start_col=3, end_line=5, end_col=1)),
    ],
)
def test_every_span_shape(header: str, span: object) -> None:
    (rec,) = parse(header)
    assert rec.path == "f.rs"
    assert rec.span == span
    assert rec.body == []


def test_body_lines_accumulate_in_order() -> None:
    recs = parse("a.rs:1\nx\ny\nb.rs:2\nz")
    assert recs == [
        Record(path="a.rs", span=Line(1), body=["x", "y"]),
        Record(path="b.rs", span=Line(2), body=["z"]),
    ]


def test_lines_before_first_header_are_ignored() -> None:
    recs = parse("garbage\na.rs:*\nbody")
    assert recs == [Record(path="a.rs", span=File(), body=["body"])]


def test_no_header_means_no_records() -> None:
    assert parse("") == []
    assert parse("just some text\nand more: stuff\n") == []


def test_body_lines_are_kept_verbatim() -> None:
    recs = parse("a.rs:1\n  indented\ttab  \n\n  \nlast")
    assert recs[0].body == ["  indented\ttab  ", "", "  ", "last"]


def test_crlf_terminators_are_stripped() -> None:
    recs = parse("a.rs:1\r\nx \r\ny\r\n")
    assert recs == [Record(path="a.rs", span=Line(1), body=["x ", "y"])]


def test_trailing_newline_does_not_add_body_line() -> None:
    assert parse("a.rs:1\nx\n")[0].body == ["x"]
    assert parse("a.rs:1\nx\n\n")[0].body == ["x", ""]


def test_separator_before_next_header_is_dropped_once() -> None:
    recs = parse("a.rs:1\nx\n\n\nb.rs:2\ny")
    assert recs[0].body == ["x", ""]
    assert recs[1].body == ["y"]


def test_repeated_headers_are_not_merged() -> None:
    recs = parse("a.rs:1\none\na.rs:1\ntwo")
    assert [r.body for r in recs] == [["one"], ["two"]]


def test_absolute_and_dotted_paths() -> None:
    recs = parse("/abs/path/x.py:3\n./rel/y.py:*")
    assert [r.path for r in recs] == ["/abs/path/x.py", "./rel/y.py"]


@pytest.mark.parametrize(
    "line",
    [
        "note: this is prose",
        "a.rs:",
        "a.rs:1:2",
        "a.rs: 1",
        "a b.rs:1",
        ":1",
        "a.rs:1.",
        "a.rs:1-",
        "a.rs:-1",
        "a.rs:1.2.3",
        "a.rs:**",
        "a.rs:x",
        "a.rs:1 ",
        " a.rs:1",
        "c:\\x.rs:1",
    ],
)
def test_non_header_lines_are_body(line: str) -> None:
    recs = parse(f"a.rs:*\n{line}")
    assert len(recs) == 1
    assert recs[0].body == [line]


@pytest.mark.parametrize("header", ["f.rs:1.2-3", "f.rs:1-2.3"])
def test_mixed_columns_are_rejected(header: str) -> None:
    with pytest.raises(MalformedSpanError) as e:
        parse(f"ok.rs:1\nbody\n{header}\nmore", file="notes.ptcr")
    assert "invalid span" in str(e.value)
    assert e.value.file == "notes.ptcr"
    assert e.value.line == 3


def test_numeric_overflow_is_an_error() -> None:
    with pytest.raises(NumericOverflowError) as e:
        parse("f.rs:18446744073709551616")
    assert isinstance(e.value, ParseError)
    assert "too large" in str(e.value)


def test_largest_number_is_accepted() -> None:
    (rec,) = parse("f.rs:18446744073709551615.00000000000000000000000001")
    assert rec.span == Point(line=2**64 - 1, col=1)


def test_huge_digit_run_is_overflow_not_crash() -> None:
    with pytest.raises(NumericOverflowError):
        parse("f.rs:1-" + "9" * 10_000)


def test_parse_file(tmp_path: Path) -> None:
    p = tmp_path / "review.ptcr"
    p.write_text("src/lib.rs:10-12\nlooks fine\n", encoding="utf-8")
    assert parse_file(p) == [Record(path="src/lib.rs", span=LineRange(start=10, end=12), body=["looks fine"])]


def test_parse_file_error_names_file(tmp_path: Path) -> None:
    p = tmp_path / "review.ptcr"
    p.write_text("x.rs:1-2.3\n", encoding="utf-8")
    with pytest.raises(MalformedSpanError) as e:
        parse_file(p)
    assert str(e.value).startswith(f"{p}:1: invalid span")


def test_parse_file_missing(tmp_path: Path) -> None:
    with pytest.raises(SourceReadError) as e:
        parse_file(tmp_path / "missing.ptcr")
    assert "missing.ptcr" in str(e.value)


def test_parse_file_keeps_lone_carriage_returns(tmp_path: Path) -> None:
    p = tmp_path / "review.ptcr"
    p.write_bytes(b"a.rs:1\nfoo\rbar\nx\rb.rs:2\r\nlast\r\n")
    assert parse_file(p) == [Record(path="a.rs", span=Line(1), body=["foo\rbar", "x\rb.rs:2", "last"])]


def test_parse_file_invalid_utf8(tmp_path: Path) -> None:
    p = tmp_path / "review.ptcr"
    p.write_bytes(b"a.rs:1\n\xff\xfe\n")
    with pytest.raises(SourceReadError) as e:
        parse_file(p)
    assert "review.ptcr" in str(e.value)


def test_parse_empty_body_separator_before_next_header() -> None:
    recs = parse("a.rs:1\nx\n\nb.rs:2")
    assert [r.body for r in recs] == [["x"], []]
