"""Per-run validation state."""

from __future__ import annotations

from dataclasses import dataclass, field

from dockercheck.document import TextDocument
from dockercheck.models.diagnostics import Diagnostic
from dockercheck.models.settings import ValidatorSettings
from dockercheck.parser.cursor import DEFAULT_ESCAPE, Cursor
from dockercheck.validation.diagnostics import DiagnosticFactory


@dataclass
class ValidationContext:
    """Everything a single ``validate`` call reads and writes.

    A fresh context is built for every call, so one ``Validator`` can check
    many documents concurrently without sharing state between them.
    """

    document: TextDocument
    settings: ValidatorSettings
    keywords: frozenset[str]
    escape: str = DEFAULT_ESCAPE
    body_offset: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)
    factory: DiagnosticFactory = field(init=False)

    def __post_init__(self) -> None:
        self.factory = DiagnosticFactory(self.document)

    @property
    def text(self) -> str:
        return self.document.get_text()

    def cursor(self, offset: int = 0, end: int | None = None) -> Cursor:
        return Cursor(self.text, self.escape, offset=offset, end=end)

    def report(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
