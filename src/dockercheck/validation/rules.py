"""Per-keyword handling shared by the document-model pass and the structural scanner."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum

from dockercheck.models.diagnostics import Diagnostic
from dockercheck.parser.nodes import Argument
from dockercheck.validation.diagnostics import DiagnosticFactory


class BodyCheck(StrEnum):
    """What the structural scanner does with the rest of an instruction's line."""

    SKIP_LINE = "skip_line"
    JSON_ARRAY = "json_array"
    REQUIRE_CONTENT = "require_content"


def is_valid_stop_signal(value: str) -> bool:
    return value.startswith("SIG") or all("0" <= ch <= "9" for ch in value)


def is_valid_port(value: str) -> bool:
    """A port or ``low-high`` port range: digits and dashes, no dash at either end."""
    if not all(ch == "-" or "0" <= ch <= "9" for ch in value):
        return False
    return not value.startswith("-") and not value.endswith("-")


def _accept_any(value: str) -> bool:
    return True


def _invalid_stop_signal(factory: DiagnosticFactory, argument: Argument) -> Diagnostic:
    return factory.invalid_stop_signal(argument.span.start, argument.span.end)


def _invalid_port(factory: DiagnosticFactory, argument: Argument) -> Diagnostic:
    return factory.invalid_port(argument.span.start, argument.span.end, argument.value)


@dataclass(frozen=True)
class ArgumentRule:
    """Shape check for an instruction's argument tokens.

    With ``single_only`` only the first token is validated and a second token
    is reported as an extra argument; otherwise every token is validated.
    """

    single_only: bool
    predicate: Callable[[str], bool] = _accept_any
    diagnostic: Callable[[DiagnosticFactory, Argument], Diagnostic] | None = None


@dataclass(frozen=True)
class InstructionRule:
    body: BodyCheck = BodyCheck.REQUIRE_CONTENT
    arguments: ArgumentRule | None = None
    deprecated: bool = False


_SINGLE_ARGUMENT = ArgumentRule(single_only=True)

RULES: dict[str, InstructionRule] = {
    "FROM": InstructionRule(BodyCheck.SKIP_LINE, _SINGLE_ARGUMENT),
    "WORKDIR": InstructionRule(BodyCheck.SKIP_LINE, _SINGLE_ARGUMENT),
    "USER": InstructionRule(BodyCheck.SKIP_LINE, _SINGLE_ARGUMENT),
    "STOPSIGNAL": InstructionRule(
        BodyCheck.SKIP_LINE,
        ArgumentRule(True, is_valid_stop_signal, _invalid_stop_signal),
    ),
    "EXPOSE": InstructionRule(
        BodyCheck.SKIP_LINE,
        ArgumentRule(False, is_valid_port, _invalid_port),
    ),
    "MAINTAINER": InstructionRule(BodyCheck.SKIP_LINE, deprecated=True),
    "VOLUME": InstructionRule(BodyCheck.JSON_ARRAY),
}

DEFAULT_RULE = InstructionRule()


def rule_for(keyword: str) -> InstructionRule:
    """Return the rule for an uppercased keyword, or the generic rule."""
    return RULES.get(keyword, DEFAULT_RULE)
