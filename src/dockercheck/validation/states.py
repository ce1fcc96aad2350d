"""States of the raw-text scanners."""

from __future__ import annotations

from enum import StrEnum


class ScanState(StrEnum):
    SCANNING_LINE = "scanning_line"
    IN_COMMENT = "in_comment"
    IN_WORD = "in_word"
    IN_ARRAY_BODY = "in_array_body"
    IN_ARRAY_STRING = "in_array_string"
