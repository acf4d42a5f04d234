from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

from .errors import SourceReadError
from .format import format_records
from .parser import parse
from .records import Record


logger = logging.getLogger(__name__)


def parse_source(src: str, *, file: str = "<memory>") -> list[Record]:
    return parse(src, file=file)


def read_text(path: str | Path) -> str:
    """Read a whole file as UTF-8, turning OS errors into ``SourceReadError``.

    Line terminators are left untouched, ``split_lines`` decides what ends a line.
    """
    p = Path(path)
    try:
        return p.read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise SourceReadError(path=str(p), reason=reason) from e


def parse_file(path: str | Path) -> list[Record]:
    p = Path(path)
    records = parse(read_text(p), file=str(p))
    logger.debug("parsed %d record(s) from %s", len(records), p)
    return records


def write_file(path: str | Path, records: Iterable[Record]) -> None:
    p = Path(path)
    data = format_records(records).encode("utf-8")
    p.write_bytes(data)
    logger.debug("wrote %s (%d bytes)", p, len(data))
