"""Validation endpoint: POST /validate."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from dockercheck.api.deps import get_settings
from dockercheck.api.schemas import ValidateRequest, ValidateResponse
from dockercheck.document import TextDocument
from dockercheck.keywords import DEFAULT_KEYWORDS
from dockercheck.models.diagnostics import DiagnosticSeverity
from dockercheck.settings import Settings
from dockercheck.validation import Validator

logger = logging.getLogger("dockercheck.api")

router = APIRouter()


@router.post("", response_model=ValidateResponse)
async def validate_document(
    body: ValidateRequest,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> ValidateResponse:
    """Validate Dockerfile text and return its diagnostics in report order."""
    if len(body.content) > settings.max_document_chars:
        raise HTTPException(
            status_code=413,
            detail=(
                f"Document too large ({len(body.content):,} chars > "
                f"{settings.max_document_chars:,} limit)"
            ),
        )

    validator = Validator(body.settings or settings.validator_settings())
    keywords = body.keywords if body.keywords is not None else DEFAULT_KEYWORDS
    diagnostics = validator.validate(keywords, TextDocument(body.content))
    errors = sum(1 for d in diagnostics if d.severity == DiagnosticSeverity.ERROR)
    logger.info(
        "validate: %d chars, %d diagnostics (%d errors)",
        len(body.content), len(diagnostics), errors,
    )
    return ValidateResponse(
        diagnostics=diagnostics,
        errors=errors,
        warnings=len(diagnostics) - errors,
    )
