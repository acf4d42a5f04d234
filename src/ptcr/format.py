from __future__ import annotations

from collections.abc import Iterable

from . import spans as S
from .records import Record


def format_records(records: Iterable[Record]) -> str:
    """Render records in canonical PTCR form.

    Records are separated by one blank line; every line, the last included,
    is newline terminated.
    """
    out: list[str] = []
    for i, rec in enumerate(records):
        if i > 0:
            out.append("")
        out.append(format_header(rec))
        out.extend(rec.body)

    if not out:
        return ""
    return "\n".join(out) + "\n"


def format_header(rec: Record) -> str:
    return f"{rec.path}:{format_span(rec.span)}"


def format_span(span: S.Span) -> str:
    if isinstance(span, S.File):
        return "*"
    if isinstance(span, S.Line):
        return str(span.line)
    if isinstance(span, S.Point):
        return f"{span.line}.{span.col}"
    if isinstance(span, S.LineRange):
        return f"{span.start}-{span.end}"
    if isinstance(span, S.ColumnRange):
        # The line is repeated on both ends so the header parses back to a ColumnRange.
        return f"{span.line}.{span.start_col}-{span.line}.{span.end_col}"
    if isinstance(span, S.MultiLine):
        return f"{span.start_line}.{span.start_col}-{span.end_line}.{span.end_col}"
    raise TypeError(f"unsupported span: {type(span).__name__}")
