from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class File:
    """The whole referenced file."""


@dataclass(frozen=True, slots=True)
class Line:
    line: int


@dataclass(frozen=True, slots=True)
class Point:
    """A single character position.

    Line and column are 1-based, as written in the header.
    """

    line: int
    col: int


@dataclass(frozen=True, slots=True)
class LineRange:
    """Lines ``start..end``, both inclusive."""

    start: int
    end: int


@dataclass(frozen=True, slots=True)
class ColumnRange:
    line: int
    start_col: int
    end_col: int


@dataclass(frozen=True, slots=True)
class MultiLine:
    start_line: int
    start_col: int
    end_line: int
    end_col: int


Span = Union[File, Line, Point, LineRange, ColumnRange, MultiLine]

SPAN_TYPES: tuple[type, ...] = (File, Line, Point, LineRange, ColumnRange, MultiLine)


class MixedColumnsError(ValueError):
    """One end of a range has a column and the other does not."""


def span_from_parts(
    start_line: int | None,
    start_col: int | None = None,
    end_line: int | None = None,
    end_col: int | None = None,
) -> Span:
    """Build the span described by the decoded header numbers.

    ``start_line`` is None only for the ``*`` form. A range whose two ends
    sit on the same line with columns collapses to ``ColumnRange``.
    """
    if start_line is None:
        return File()
    if end_line is None:
        if start_col is None:
            return Line(start_line)
        return Point(line=start_line, col=start_col)
    if start_col is None and end_col is None:
        return LineRange(start=start_line, end=end_line)
    if start_col is None or end_col is None:
        raise MixedColumnsError("invalid span")
    if start_line == end_line:
        return ColumnRange(line=start_line, start_col=start_col, end_col=end_col)
    return MultiLine(start_line=start_line, start_col=start_col, end_line=end_line, end_col=end_col)
