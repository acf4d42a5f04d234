from __future__ import annotations

from .grammar import match_header
from .records import Record


def split_lines(text: str) -> list[str]:
    """Split *text* into lines without their terminators.

    Only ``\\n`` ends a line, with an optional ``\\r`` before it. A final
    terminator does not start an extra empty line.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [ln[:-1] if ln.endswith("\r") else ln for ln in lines]


def parse(src: str, *, file: str = "<memory>") -> list[Record]:
    """Parse PTCR text into records, in file order.

    Lines before the first header are ignored. The first malformed header
    aborts the whole parse.

    Body lines are kept verbatim with one exception: when a header closes a
    record whose body ends in an empty line, that one line is dropped as the
    separator ``format_records`` writes. So ``"a.rs:1\\nx\\n\\nb.rs:2"`` gives
    ``a.rs`` the body ``["x"]``, not ``["x", ""]``.
    """
    records: list[Record] = []
    current: Record | None = None

    for lineno, line in enumerate(split_lines(src), start=1):
        header = match_header(line, file=file, lineno=lineno)
        if header is None:
            if current is not None:
                current.body.append(line)
            continue

        if current is not None:
            # A single trailing blank line is the separator written by format_records.
            if current.body and current.body[-1] == "":
                current.body.pop()
            records.append(current)
        path, span = header
        current = Record(path=path, span=span)

    if current is not None:
        records.append(current)
    return records
