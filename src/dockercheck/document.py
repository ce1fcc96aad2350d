"""Text accessor mapping string offsets to editor positions and back."""

from __future__ import annotations

from bisect import bisect_right

from dockercheck.models.diagnostics import Position, Range


def _utf16_len(text: str) -> int:
    # Characters outside the BMP take a surrogate pair.
    return sum(2 if ord(ch) > 0xFFFF else 1 for ch in text)


class TextDocument:
    """Immutable snapshot of a document's text.

    Offsets are indices into the Python string. Positions use zero-based
    lines and UTF-16 code-unit columns, which is what editor protocols
    expect. ``\\r\\n``, ``\\r`` and ``\\n`` each terminate a line.
    """

    def __init__(self, text: str, uri: str = "untitled:Dockerfile") -> None:
        self._text = text
        self.uri = uri
        self._line_starts = self._compute_line_starts(text)

    @staticmethod
    def _compute_line_starts(text: str) -> list[int]:
        starts = [0]
        i = 0
        length = len(text)
        while i < length:
            ch = text[i]
            if ch == "\r":
                if i + 1 < length and text[i + 1] == "\n":
                    i += 1
                starts.append(i + 1)
            elif ch == "\n":
                starts.append(i + 1)
            i += 1
        return starts

    # -- accessors -----------------------------------------------------------

    def get_text(self) -> str:
        return self._text

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def _clamp(self, offset: int) -> int:
        return max(0, min(offset, len(self._text)))

    def position_at(self, offset: int) -> Position:
        """Convert a string offset to a position, clamping to the document bounds."""
        offset = self._clamp(offset)
        line = bisect_right(self._line_starts, offset) - 1
        line_start = self._line_starts[line]
        return Position(line=line, character=_utf16_len(self._text[line_start:offset]))

    def offset_at(self, position: Position) -> int:
        """Convert a position back to a string offset.

        Lines past the end map to the end of the text; columns past the end
        of a line map to the end of that line's content.
        """
        if position.line < 0:
            return 0
        if position.line >= len(self._line_starts):
            return len(self._text)
        line_start = self._line_starts[position.line]
        line_end = self._line_content_end(position.line)
        units = 0
        offset = line_start
        while offset < line_end and units < position.character:
            units += 2 if ord(self._text[offset]) > 0xFFFF else 1
            offset += 1
        return offset

    def _line_content_end(self, line: int) -> int:
        if line + 1 < len(self._line_starts):
            end = self._line_starts[line + 1]
        else:
            return len(self._text)
        while end > self._line_starts[line] and self._text[end - 1] in "\r\n":
            end -= 1
        return end

    def line_text(self, line: int) -> str:
        """Return the content of *line* without its terminating line break."""
        return self._text[self._line_starts[line] : self._line_content_end(line)]

    def range_at(self, start: int, end: int) -> Range:
        return Range(start=self.position_at(start), end=self.position_at(end))
