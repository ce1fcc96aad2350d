"""Continuation-splicing cursor shared by the parser and every validation pass.

A *continuation* is the escape character immediately followed by a line
break (``\\n``, ``\\r`` or ``\\r\\n``). It joins the next physical line to the
current logical one, so readers skip over it as if it were not there.
"""

from __future__ import annotations

LINE_BREAKS = ("\r", "\n")
INLINE_WHITESPACE = (" ", "\t")
WHITESPACE = (" ", "\t", "\r", "\n")
DEFAULT_ESCAPE = "\\"
ESCAPE_CHARS = ("\\", "`")


def is_whitespace(ch: str) -> bool:
    return ch in WHITESPACE


class Cursor:
    """Forward-only reader over ``text[offset:end]`` that understands continuations."""

    __slots__ = ("text", "escape", "offset", "end")

    def __init__(
        self, text: str, escape: str = DEFAULT_ESCAPE, offset: int = 0, end: int | None = None
    ) -> None:
        self.text = text
        self.escape = escape
        self.offset = offset
        self.end = len(text) if end is None else end

    def __repr__(self) -> str:
        return f"Cursor(offset={self.offset}, end={self.end}, escape={self.escape!r})"

    @property
    def done(self) -> bool:
        return self.offset >= self.end

    @property
    def char(self) -> str:
        return self.text[self.offset]

    def peek(self, ahead: int = 1) -> str:
        index = self.offset + ahead
        return self.text[index] if index < self.end else ""

    def advance(self, count: int = 1) -> None:
        self.offset += count

    def at_line_break(self) -> bool:
        return not self.done and self.text[self.offset] in LINE_BREAKS

    def at_continuation(self) -> bool:
        """True if at an escape that is followed by a line break.

        An escape on the very last character of the text never continues.
        """
        i = self.offset
        return (
            i < self.end - 1
            and self.text[i] == self.escape
            and self.text[i + 1] in LINE_BREAKS
        )

    def skip_line_break(self) -> None:
        """Step over one line break, treating ``\\r\\n`` as a single break."""
        if self.text[self.offset] == "\r" and self.peek() == "\n":
            self.offset += 2
        else:
            self.offset += 1

    def skip_continuation(self) -> bool:
        if not self.at_continuation():
            return False
        self.offset += 1
        self.skip_line_break()
        return True

    def skip_continuations(self) -> bool:
        """Skip any run of consecutive continuations; return True if one was skipped."""
        skipped = False
        while self.skip_continuation():
            skipped = True
        return skipped

    def skip_inline_whitespace(self) -> None:
        """Skip spaces, tabs and continuations, stopping at a real line break."""
        while not self.done:
            if self.skip_continuation():
                continue
            if self.text[self.offset] not in INLINE_WHITESPACE:
                return
            self.offset += 1

    def skip_to_line_break(self) -> None:
        """Advance to the next real line break (or the end), splicing continuations."""
        while not self.done:
            if self.skip_continuation():
                continue
            if self.text[self.offset] in LINE_BREAKS:
                return
            self.offset += 1

    def read_word(self) -> tuple[str, int]:
        """Read a whitespace-delimited word, splicing continuations out of it.

        Returns the word and the offset just past its last character, which
        excludes any continuation trailing it.
        """
        chars: list[str] = []
        word_end = self.offset
        while not self.done:
            if self.skip_continuation():
                continue
            ch = self.text[self.offset]
            if ch in WHITESPACE:
                break
            chars.append(ch)
            self.offset += 1
            word_end = self.offset
        return "".join(chars), word_end
