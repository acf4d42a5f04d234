from __future__ import annotations

from dataclasses import dataclass, field

from .spans import Span


@dataclass(slots=True)
class Record:
    """One annotation: a location in ``path`` plus free-text body lines.

    ``path`` is kept exactly as written in the header, relative paths are
    resolved against the PTCR file's directory only when rendering.
    """

    path: str
    span: Span
    body: list[str] = field(default_factory=list)
