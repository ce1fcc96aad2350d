"""Keyword listing endpoint: GET /keywords."""

from __future__ import annotations

from fastapi import APIRouter

from dockercheck.api.schemas import KeywordListResponse
from dockercheck.keywords import DEFAULT_KEYWORDS

router = APIRouter()


@router.get("", response_model=KeywordListResponse)
async def list_keywords() -> KeywordListResponse:
    """List the instruction keywords recognized by default."""
    return KeywordListResponse(keywords=list(DEFAULT_KEYWORDS))
