"""Pydantic models shared by the parser, validator and API."""

from dockercheck.models.diagnostics import (
    DIAGNOSTIC_SOURCE,
    Diagnostic,
    DiagnosticSeverity,
    Position,
    Range,
    ValidationCode,
)
from dockercheck.models.settings import ValidationSeverity, ValidatorSettings

__all__ = [
    "DIAGNOSTIC_SOURCE",
    "Diagnostic",
    "DiagnosticSeverity",
    "Position",
    "Range",
    "ValidationCode",
    "ValidationSeverity",
    "ValidatorSettings",
]
