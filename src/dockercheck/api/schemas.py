"""API request/response Pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, Field

from dockercheck.models.diagnostics import Diagnostic
from dockercheck.models.settings import ValidatorSettings


class ValidateRequest(BaseModel):
    """Request body for POST /validate."""

    content: str = Field(description="Dockerfile text to validate")
    keywords: list[str] | None = Field(
        default=None,
        description="Recognized instruction keywords; defaults to the standard set",
    )
    settings: ValidatorSettings | None = None


class ValidateResponse(BaseModel):
    """Response body for POST /validate."""

    diagnostics: list[Diagnostic] = []
    errors: int = 0
    warnings: int = 0


class KeywordListResponse(BaseModel):
    """Response for GET /keywords."""

    keywords: list[str] = []


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = "ok"
    version: str = ""
