"""Positioned diagnostic records reported to the editor."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel

DIAGNOSTIC_SOURCE = "dockerfile-lsp"


class DiagnosticSeverity(IntEnum):
    """Severity values as defined by the Language Server Protocol."""

    ERROR = 1
    WARNING = 2


class ValidationCode(IntEnum):
    DEFAULT = 0
    LOWERCASE = 1
    EXTRA_ARGUMENT = 2
    NO_SOURCE_IMAGE = 3
    MISSING_ARGUMENT = 4
    INVALID_ESCAPE_DIRECTIVE = 5
    INVALID_PORT = 6
    INVALID_STOPSIGNAL = 7
    UNKNOWN_DIRECTIVE = 8
    UNKNOWN_INSTRUCTION = 9
    DEPRECATED_MAINTAINER = 10


class Position(BaseModel):
    """Zero-based line and UTF-16 character offset within that line."""

    line: int
    character: int

    model_config = {"frozen": True}

    def __lt__(self, other: Position) -> bool:
        return (self.line, self.character) < (other.line, other.character)

    def __le__(self, other: Position) -> bool:
        return (self.line, self.character) <= (other.line, other.character)


class Range(BaseModel):
    start: Position
    end: Position

    model_config = {"frozen": True}

    @classmethod
    def create(cls, start_line: int, start_char: int, end_line: int, end_char: int) -> Range:
        return cls(
            start=Position(line=start_line, character=start_char),
            end=Position(line=end_line, character=end_char),
        )

    def contains(self, position: Position) -> bool:
        """Return True if *position* lies within this range (both ends inclusive)."""
        return self.start <= position <= self.end

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


class Diagnostic(BaseModel):
    """A single finding: where, what, how severe, and which check produced it."""

    range: Range
    message: str
    severity: DiagnosticSeverity
    code: ValidationCode = ValidationCode.DEFAULT
    source: str = DIAGNOSTIC_SOURCE

    model_config = {"frozen": True}
