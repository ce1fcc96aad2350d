"""Per-validator configuration."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, Field


class ValidationSeverity(StrEnum):
    IGNORE = "ignore"
    WARNING = "warning"
    ERROR = "error"


class ValidatorSettings(BaseModel):
    """Severity overrides applied by a :class:`~dockercheck.validation.Validator`.

    Only the MAINTAINER deprecation is configurable; ``ignore`` suppresses it.
    """

    deprecated_maintainer: ValidationSeverity = Field(
        ValidationSeverity.WARNING, alias="deprecatedMaintainer"
    )

    model_config = {"populate_by_name": True, "frozen": True}
