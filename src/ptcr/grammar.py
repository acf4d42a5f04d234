from __future__ import annotations

import re

from .errors import MalformedSpanError, NumericOverflowError
from .spans import MixedColumnsError, Span, span_from_parts


# PATH ":" ( "*" | NUM ("." NUM)? ("-" NUM ("." NUM)?)? )
HEADER_RE = re.compile(
    r"([^\s:]+):(\*|([0-9]+)(?:\.([0-9]+))?(?:-([0-9]+)(?:\.([0-9]+))?)?)",
)

# Numbers are unsigned 64-bit.
MAX_NUMBER = 2**64 - 1
_MAX_DIGITS = len(str(MAX_NUMBER))


def parse_number(digits: str, *, file: str = "<memory>", lineno: int = 0) -> int:
    """Decode one ASCII digit run, rejecting values above ``MAX_NUMBER``."""
    stripped = digits.lstrip("0") or "0"
    if len(stripped) > _MAX_DIGITS or int(stripped) > MAX_NUMBER:
        raise NumericOverflowError(
            file=file,
            line=lineno,
            message=f"number too large: {digits}",
            hint=f"line and column numbers must not exceed {MAX_NUMBER}",
        )
    return int(stripped)


def match_header(line: str, *, file: str = "<memory>", lineno: int = 0) -> tuple[str, Span] | None:
    """Return ``(path, span)`` when *line* is a header, None otherwise.

    Raises ``MalformedSpanError`` for headers mixing column and no-column
    ends, and ``NumericOverflowError`` for out of range numbers.
    """
    m = HEADER_RE.fullmatch(line)
    if m is None:
        return None

    path, _, sl, sc, el, ec = m.groups()
    nums = [None if g is None else parse_number(g, file=file, lineno=lineno) for g in (sl, sc, el, ec)]
    try:
        span = span_from_parts(*nums)
    except MixedColumnsError as e:
        raise MalformedSpanError(
            file=file,
            line=lineno,
            message=str(e),
            hint="give both ends a column (L.C-L.C) or neither (L-L)",
        ) from None
    return path, span
