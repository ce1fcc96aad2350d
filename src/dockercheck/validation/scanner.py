"""Structural scanner: a raw-text pass that does not depend on the parsed model.

It walks instruction boundaries itself, honouring comments and
continuations, so it can still say something useful about text the parser
would model differently. It runs after the document-model pass and appends
to the same diagnostic list.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from dockercheck.parser.cursor import INLINE_WHITESPACE, is_whitespace
from dockercheck.validation.context import ValidationContext
from dockercheck.validation.json_array import JsonArrayValidator
from dockercheck.validation.rules import DEFAULT_RULE, RULES, BodyCheck
from dockercheck.validation.states import ScanState

logger = logging.getLogger(__name__)


class StructuralScanner:
    """Finite-state machine over ``SCANNING_LINE``, ``IN_COMMENT`` and ``IN_WORD``.

    Each handler returns the next state, or ``None`` to stop. Scanning stops
    at the end of the text, or at the first word that is not a known
    instruction. In that case the rest of the document is left unscanned.
    """

    def __init__(self, ctx: ValidationContext) -> None:
        self._ctx = ctx
        self._cursor = ctx.cursor(ctx.body_offset)
        self._arrays = JsonArrayValidator(ctx)
        self._transitions: dict[ScanState, Callable[[], ScanState | None]] = {
            ScanState.SCANNING_LINE: self._scan_line,
            ScanState.IN_COMMENT: self._in_comment,
            ScanState.IN_WORD: self._in_word,
        }
        self._body_checks: dict[BodyCheck, Callable[[], ScanState | None]] = {
            BodyCheck.SKIP_LINE: self._skip_line,
            BodyCheck.JSON_ARRAY: self._check_array,
            BodyCheck.REQUIRE_CONTENT: self._require_content,
        }

    def scan(self) -> None:
        state: ScanState | None = ScanState.SCANNING_LINE
        while state is not None:
            state = self._transitions[state]()

    # -- states --------------------------------------------------------------

    def _scan_line(self) -> ScanState | None:
        cursor = self._cursor
        while not cursor.done and is_whitespace(cursor.char):
            cursor.advance()
        if cursor.done:
            return None
        if cursor.char == "#":
            return ScanState.IN_COMMENT
        return ScanState.IN_WORD

    def _in_comment(self) -> ScanState | None:
        cursor = self._cursor
        while not cursor.done and not cursor.at_line_break():
            cursor.advance()
        return None if cursor.done else ScanState.SCANNING_LINE

    def _in_word(self) -> ScanState | None:
        start = self._cursor.offset
        word, _ = self._cursor.read_word()
        if not word:
            # only a continuation was consumed
            return ScanState.SCANNING_LINE
        keyword = word.upper()
        rule = RULES.get(keyword)
        if rule is None:
            if keyword not in self._ctx.keywords:
                logger.debug(
                    "Unknown instruction %r at offset %d; stopping structural scan",
                    word, start,
                )
                return None
            rule = DEFAULT_RULE
        return self._body_checks[rule.body]()

    # -- instruction bodies --------------------------------------------------

    def _next_line(self) -> ScanState | None:
        self._cursor.skip_to_line_break()
        return None if self._cursor.done else ScanState.SCANNING_LINE

    def _skip_line(self) -> ScanState | None:
        return self._next_line()

    def _check_array(self) -> ScanState | None:
        # May land mid-line on a quote; the rest of that line is then read as a word.
        self._cursor.offset = self._arrays.validate(self._cursor.offset)
        return None if self._cursor.done else ScanState.SCANNING_LINE

    def _require_content(self) -> ScanState | None:
        cursor = self._cursor
        start = cursor.offset
        has_content = False
        while not cursor.done:
            if cursor.skip_continuation():
                continue
            if cursor.at_line_break():
                break
            if cursor.char not in INLINE_WHITESPACE:
                has_content = True
            cursor.advance()
        if not has_content:
            logger.debug("Instruction body at offset %d is empty", start)
        return None if cursor.done else ScanState.SCANNING_LINE
