from __future__ import annotations

from dataclasses import dataclass


class PtcrError(Exception):
    """Base class for every error raised by ptcr."""


@dataclass(slots=True)
class ParseError(PtcrError):
    file: str
    line: int
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.file}:{self.line}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


class MalformedSpanError(ParseError):
    pass


class NumericOverflowError(ParseError):
    pass


@dataclass(slots=True)
class SourceReadError(PtcrError):
    path: str
    reason: str

    def __str__(self) -> str:
        return f"failed to read {self.path}: {self.reason}"
