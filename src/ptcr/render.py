from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from . import spans as S
from .api import parse_file, read_text
from .format import format_header
from .parser import split_lines
from .records import Record


logger = logging.getLogger(__name__)


def line_bounds(span: S.Span, line_count: int) -> tuple[int, int]:
    """1-based inclusive line bounds covered by *span*.

    The end is clamped to ``line_count``; the start is left as written.
    """
    if isinstance(span, S.File):
        start, end = 1, line_count
    elif isinstance(span, S.Line):
        start, end = span.line, span.line
    elif isinstance(span, S.Point):
        start, end = span.line, span.line
    elif isinstance(span, S.LineRange):
        start, end = span.start, span.end
    elif isinstance(span, S.ColumnRange):
        start, end = span.line, span.line
    elif isinstance(span, S.MultiLine):
        start, end = span.start_line, span.end_line
    else:
        raise TypeError(f"unsupported span: {type(span).__name__}")
    return start, min(end, line_count)


def context_window(span: S.Span, line_count: int, context: int = 0) -> range:
    """0-based indexes of the source lines to print for *span*."""
    if context < 0:
        raise ValueError("context must be non-negative")
    start, end = line_bounds(span, line_count)
    return range(max(0, start - 1 - context), min(line_count, end + context))


def render_record(rec: Record, source: str, *, context: int = 0) -> list[str]:
    lines = split_lines(source)
    out = [format_header(rec)]
    for i in context_window(rec.span, len(lines), context):
        out.append(f"{i + 1:>5} | {lines[i]}")
    out.append("---")
    out.extend(rec.body)
    return out


def print_ptcr_file(ptcr_file: str | Path, *, context: int = 0, out: TextIO | None = None) -> None:
    """Print every record of *ptcr_file* next to the source lines it points at.

    Record paths are resolved against the directory holding *ptcr_file*. A
    missing source file stops the run with ``SourceReadError``.
    """
    stream = out if out is not None else sys.stdout
    ptcr_path = Path(ptcr_file)
    base = ptcr_path.parent
    for rec in parse_file(ptcr_path):
        source_path = base / rec.path
        logger.debug("rendering %s against %s", format_header(rec), source_path)
        for line in render_record(rec, read_text(source_path), context=context):
            print(line, file=stream)
        print(file=stream)
