"""Structural check of JSON-form instruction bodies such as ``VOLUME ["/data"]``.

This is deliberately not a JSON parser. It recognizes the restricted shape
Docker accepts, a single-line bracketed list of double-quoted strings, and
reports the first place where the shape breaks.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from dockercheck.parser.cursor import INLINE_WHITESPACE
from dockercheck.validation.context import ValidationContext
from dockercheck.validation.states import ScanState


@dataclass
class _ArrayScan:
    last: int
    state: ScanState = ScanState.IN_ARRAY_BODY
    expect_comma: bool = False
    flagged: bool = False
    end: bool = False


class JsonArrayValidator:
    """Validates bracketed string arrays and reports UNEXPECTED_TOKEN diagnostics."""

    def __init__(self, ctx: ValidationContext) -> None:
        self._ctx = ctx
        # Each handler consumes one character; a non-None result stops the scan there.
        self._transitions: dict[ScanState, Callable[[_ArrayScan, int, str], int | None]] = {
            ScanState.IN_ARRAY_BODY: self._in_body,
            ScanState.IN_ARRAY_STRING: self._in_string,
        }

    def validate(self, offset: int) -> int:
        """Check the body that starts at *offset* and return where checking stopped.

        A body that does not open with ``[`` is in shell form and is not
        checked. The returned offset is a line break, the end of the text, or
        the quote at which a missing comma was reported.
        """
        cursor = self._ctx.cursor(offset)
        json_form = True
        while not cursor.done:
            if cursor.skip_continuation():
                continue
            ch = cursor.char
            if cursor.at_line_break():
                return cursor.offset
            if ch == "[" and json_form:
                return self.validate_array(cursor.offset)
            if ch not in INLINE_WHITESPACE:
                json_form = False
            cursor.advance()
        return cursor.offset

    def validate_array(self, bracket: int) -> int:
        """Walk the array that opens at *bracket*."""
        cursor = self._ctx.cursor(bracket + 1)
        scan = _ArrayScan(last=bracket)
        while not cursor.done:
            # continuations are literal text inside a string
            if scan.state is ScanState.IN_ARRAY_BODY and cursor.skip_continuation():
                continue
            if cursor.at_line_break():
                if not scan.end and not scan.flagged:
                    self._report(scan.last)
                return cursor.offset
            stop = self._transitions[scan.state](scan, cursor.offset, cursor.char)
            if stop is not None:
                return stop
            cursor.advance()

        if not scan.flagged and (scan.state is ScanState.IN_ARRAY_STRING or not scan.end):
            self._report(scan.last)
        return cursor.offset

    def _report(self, offset: int) -> None:
        self._ctx.report(self._ctx.factory.unexpected_token(offset, offset + 1))

    def _in_body(self, scan: _ArrayScan, offset: int, ch: str) -> int | None:
        if ch == '"':
            if scan.expect_comma and not scan.flagged:
                self._report(offset)
                return offset
            scan.state = ScanState.IN_ARRAY_STRING
            scan.expect_comma = False
            scan.last = offset
        elif ch in INLINE_WHITESPACE:
            pass
        elif ch == "]":
            scan.end = True
            scan.last = offset
        elif ch == ",":
            scan.expect_comma = False
            scan.last = offset
        else:
            scan.last = offset
            if not scan.flagged:
                self._report(offset)
                scan.flagged = True
        return None

    def _in_string(self, scan: _ArrayScan, offset: int, ch: str) -> int | None:
        if ch == '"':
            scan.state = ScanState.IN_ARRAY_BODY
            scan.expect_comma = True
            scan.last = offset
        elif ch not in INLINE_WHITESPACE:
            scan.last = offset
        return None

