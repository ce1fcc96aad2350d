"""Diagnostic factory and the fixed message catalog."""

from __future__ import annotations

from dockercheck.document import TextDocument
from dockercheck.models.diagnostics import Diagnostic, DiagnosticSeverity, ValidationCode
from dockercheck.models.settings import ValidationSeverity

MESSAGES: dict[str, str] = {
    "directive_unknown": "Unknown directive: {0}",
    "directive_escape_invalid": "invalid ESCAPE '{0}'. Must be ` or \\",
    "no_source_image": "No source image provided with `FROM`",
    "invalid_port": "Invalid containerPort: {0}",
    "invalid_stop_signal": "Invalid stop signal",
    "instruction_extra_argument": "Instruction has an extra argument",
    "instruction_missing_argument": "Instruction has no arguments",
    "instruction_unknown": "Unknown instruction: {0}",
    "instruction_casing": "Instructions should be written in uppercase letters",
    "deprecated_maintainer": "MAINTAINER has been deprecated",
    "unexpected_token": "Unexpected token",
}

_SEVERITIES = {
    ValidationSeverity.WARNING: DiagnosticSeverity.WARNING,
    ValidationSeverity.ERROR: DiagnosticSeverity.ERROR,
}


def format_message(key: str, value: str = "") -> str:
    """Fill the single ``{0}`` slot of a catalog template.

    Plain substitution, so braces inside *value* are left alone.
    """
    return MESSAGES[key].replace("{0}", value)


class DiagnosticFactory:
    """Builds diagnostics for one document from string offsets."""

    def __init__(self, document: TextDocument) -> None:
        self._document = document

    def create_diagnostic(
        self,
        severity: DiagnosticSeverity,
        start: int,
        end: int,
        message: str,
        code: ValidationCode = ValidationCode.DEFAULT,
    ) -> Diagnostic:
        return Diagnostic(
            range=self._document.range_at(start, end),
            message=message,
            severity=severity,
            code=code,
        )

    def create_error(
        self, start: int, end: int, message: str, code: ValidationCode = ValidationCode.DEFAULT
    ) -> Diagnostic:
        return self.create_diagnostic(DiagnosticSeverity.ERROR, start, end, message, code)

    def create_warning(
        self, start: int, end: int, message: str, code: ValidationCode = ValidationCode.DEFAULT
    ) -> Diagnostic:
        return self.create_diagnostic(DiagnosticSeverity.WARNING, start, end, message, code)

    # -- directives ----------------------------------------------------------

    def unknown_directive(self, start: int, end: int, directive: str) -> Diagnostic:
        return self.create_error(
            start, end, format_message("directive_unknown", directive),
            ValidationCode.UNKNOWN_DIRECTIVE,
        )

    def invalid_escape_directive(self, start: int, end: int, value: str) -> Diagnostic:
        return self.create_error(
            start, end, format_message("directive_escape_invalid", value),
            ValidationCode.INVALID_ESCAPE_DIRECTIVE,
        )

    # -- instructions --------------------------------------------------------

    def no_source_image(self, start: int, end: int) -> Diagnostic:
        return self.create_error(
            start, end, format_message("no_source_image"), ValidationCode.NO_SOURCE_IMAGE
        )

    def unknown_instruction(self, start: int, end: int, instruction: str) -> Diagnostic:
        return self.create_error(
            start, end, format_message("instruction_unknown", instruction),
            ValidationCode.UNKNOWN_INSTRUCTION,
        )

    def uppercase_instruction(self, start: int, end: int) -> Diagnostic:
        return self.create_warning(
            start, end, format_message("instruction_casing"), ValidationCode.LOWERCASE
        )

    def missing_argument(self, start: int, end: int) -> Diagnostic:
        return self.create_error(
            start, end, format_message("instruction_missing_argument"),
            ValidationCode.MISSING_ARGUMENT,
        )

    def extra_argument(self, start: int, end: int) -> Diagnostic:
        return self.create_error(
            start, end, format_message("instruction_extra_argument"),
            ValidationCode.EXTRA_ARGUMENT,
        )

    def maintainer_deprecated(
        self, severity: ValidationSeverity, start: int, end: int
    ) -> Diagnostic | None:
        """Return the deprecation diagnostic, or ``None`` when *severity* is ignore."""
        mapped = _SEVERITIES.get(severity)
        if mapped is None:
            return None
        return self.create_diagnostic(
            mapped, start, end, format_message("deprecated_maintainer"),
            ValidationCode.DEPRECATED_MAINTAINER,
        )

    # -- arguments -----------------------------------------------------------

    def invalid_port(self, start: int, end: int, port: str) -> Diagnostic:
        return self.create_error(
            start, end, format_message("invalid_port", port), ValidationCode.INVALID_PORT
        )

    def invalid_stop_signal(self, start: int, end: int) -> Diagnostic:
        return self.create_error(
            start, end, format_message("invalid_stop_signal"), ValidationCode.INVALID_STOPSIGNAL
        )

    def unexpected_token(self, start: int, end: int) -> Diagnostic:
        return self.create_error(start, end, format_message("unexpected_token"))
