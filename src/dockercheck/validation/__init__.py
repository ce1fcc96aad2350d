"""Dockerfile validation: document-model checks plus a raw-text structural scan."""

from dockercheck.validation.context import ValidationContext
from dockercheck.validation.diagnostics import MESSAGES, DiagnosticFactory, format_message
from dockercheck.validation.validator import Validator, validate_text

__all__ = [
    "MESSAGES",
    "DiagnosticFactory",
    "ValidationContext",
    "Validator",
    "format_message",
    "validate_text",
]
