from __future__ import annotations

from .api import parse_file, parse_source, write_file
from .errors import MalformedSpanError, NumericOverflowError, ParseError, PtcrError, SourceReadError
from .format import format_records, format_span
from .parser import parse
from .records import Record
from .render import print_ptcr_file, render_record
from .spans import SPAN_TYPES, ColumnRange, File, Line, LineRange, MultiLine, Point, Span

__all__ = [
    "SPAN_TYPES",
    "ColumnRange",
    "File",
    "Line",
    "LineRange",
    "MalformedSpanError",
    "MultiLine",
    "NumericOverflowError",
    "ParseError",
    "Point",
    "PtcrError",
    "Record",
    "SourceReadError",
    "Span",
    "format_records",
    "format_span",
    "parse",
    "parse_file",
    "parse_source",
    "print_ptcr_file",
    "render_record",
    "write_file",
]
