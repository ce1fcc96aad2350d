"""Shared test fixtures for dockercheck."""

from __future__ import annotations

import pytest

from dockercheck.document import TextDocument
from dockercheck.keywords import DEFAULT_KEYWORDS
from dockercheck.models.diagnostics import Diagnostic, ValidationCode
from dockercheck.models.settings import ValidatorSettings
from dockercheck.validation import Validator


@pytest.fixture
def validator() -> Validator:
    return Validator()


def run_validation(
    text: str,
    settings: ValidatorSettings | None = None,
    keywords: tuple[str, ...] | list[str] = DEFAULT_KEYWORDS,
) -> list[Diagnostic]:
    return Validator(settings).validate(keywords, TextDocument(text))


def codes(diagnostics: list[Diagnostic]) -> list[ValidationCode]:
    return [d.code for d in diagnostics]


def span_of(diagnostic: Diagnostic) -> tuple[int, int, int, int]:
    """(start line, start char, end line, end char) of a diagnostic."""
    r = diagnostic.range
    return (r.start.line, r.start.character, r.end.line, r.end.character)


SAMPLE_DOCKERFILE = """\
# escape=\\
FROM python:3.12-slim
LABEL org.opencontainers.image.title="demo"
WORKDIR /app
COPY requirements.txt .
RUN pip install --no-cache-dir \\
    -r requirements.txt
EXPOSE 8000 8001-8010
VOLUME ["/data", "/logs"]
USER app
STOPSIGNAL SIGTERM
CMD ["python", "-m", "demo"]
"""
