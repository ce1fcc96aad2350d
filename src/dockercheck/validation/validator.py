"""The ``validate`` entry point: directive, document-model pass, structural scan."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from dockercheck.document import TextDocument
from dockercheck.keywords import DEFAULT_KEYWORDS
from dockercheck.models.diagnostics import Diagnostic
from dockercheck.models.settings import ValidatorSettings
from dockercheck.parser.dockerfile import DockerfileParser
from dockercheck.validation.checks import check_instructions
from dockercheck.validation.context import ValidationContext
from dockercheck.validation.directive import resolve_escape_directive
from dockercheck.validation.scanner import StructuralScanner

logger = logging.getLogger(__name__)


class Validator:
    """Produces diagnostics for Dockerfile text.

    Configured once with :class:`ValidatorSettings`; every call to
    :meth:`validate` is independent. Diagnostics from the document-model
    pass come first, followed by those from the structural scanner, each in
    traversal order. Nothing is sorted by position.
    """

    def __init__(self, settings: ValidatorSettings | None = None) -> None:
        self.settings = settings if settings is not None else ValidatorSettings()
        self._parser = DockerfileParser()

    def validate(self, keywords: Iterable[str], document: TextDocument) -> list[Diagnostic]:
        ctx = ValidationContext(
            document=document,
            settings=self.settings,
            keywords=frozenset(keywords),
        )
        dockerfile = self._parser.parse(document)

        resolution = resolve_escape_directive(ctx, dockerfile.directive)
        ctx.escape = resolution.escape
        ctx.body_offset = resolution.body_offset

        check_instructions(ctx, dockerfile.instructions)
        StructuralScanner(ctx).scan()

        logger.debug(
            "Validated %s: %d instructions, %d diagnostics (escape=%r)",
            document.uri, len(dockerfile.instructions), len(ctx.diagnostics), ctx.escape,
        )
        return ctx.diagnostics


def validate_text(
    text: str,
    settings: ValidatorSettings | None = None,
    keywords: Iterable[str] = DEFAULT_KEYWORDS,
) -> list[Diagnostic]:
    """Validate raw Dockerfile text against the standard keyword set."""
    return Validator(settings).validate(keywords, TextDocument(text))
