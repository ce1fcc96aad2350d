"""Escape-directive resolution."""

from __future__ import annotations

from dataclasses import dataclass

from dockercheck.parser.cursor import DEFAULT_ESCAPE, ESCAPE_CHARS
from dockercheck.parser.nodes import DIRECTIVE_ESCAPE, Directive
from dockercheck.validation.context import ValidationContext


@dataclass(frozen=True)
class EscapeResolution:
    escape: str
    body_offset: int


def resolve_escape_directive(
    ctx: ValidationContext, directive: Directive | None
) -> EscapeResolution:
    """Work out the active escape character and where instruction scanning begins.

    Only ``escape`` is a known directive. Its value must be ``\\``, a backtick
    or empty. An unknown directive name is reported, but its value is still
    honoured when it happens to be a legal escape character.
    """
    if directive is None:
        return EscapeResolution(escape=DEFAULT_ESCAPE, body_offset=0)

    if directive.name != DIRECTIVE_ESCAPE:
        ctx.report(
            ctx.factory.unknown_directive(
                directive.name_span.start, directive.name_span.end, directive.raw_name
            )
        )
    elif directive.value not in ESCAPE_CHARS and directive.value != "":
        ctx.report(
            ctx.factory.invalid_escape_directive(
                directive.value_span.start, directive.value_span.end, directive.value
            )
        )

    return EscapeResolution(escape=directive.escape_char, body_offset=directive.span.end)
