"""Immutable Dockerfile document model. Nodes carry string offsets, not positions."""

from __future__ import annotations

from dataclasses import dataclass, field

from dockercheck.parser.cursor import DEFAULT_ESCAPE, ESCAPE_CHARS, INLINE_WHITESPACE, Cursor

DIRECTIVE_ESCAPE = "escape"


@dataclass(frozen=True)
class Span:
    """Half-open ``[start, end)`` offset range into the document text."""

    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def contains(self, offset: int) -> bool:
        """Inclusive of ``end``: a caret just past a token still touches it."""
        return self.start <= offset <= self.end

    def is_before(self, other: Span) -> bool:
        return self.end <= other.start

    def is_after(self, other: Span) -> bool:
        return self.start >= other.end


@dataclass(frozen=True)
class Directive:
    """A ``# name=value`` parser directive on the first line of the file."""

    name: str
    raw_name: str
    value: str
    span: Span
    name_span: Span
    value_span: Span

    @property
    def escape_char(self) -> str:
        """The escape character this directive selects.

        The value is honoured whenever it is a legal escape character, even if
        the directive name itself is not ``escape``.
        """
        return self.value if self.value in ESCAPE_CHARS else DEFAULT_ESCAPE


@dataclass(frozen=True)
class Argument:
    value: str
    span: Span


@dataclass(frozen=True)
class Instruction:
    """One logical instruction, possibly spread over several physical lines."""

    keyword: str
    instruction: str
    text_content: str
    span: Span
    instruction_span: Span

    @property
    def arguments_span(self) -> Span:
        return Span(self.instruction_span.end, self.span.end)

    def arguments(self, escape: str = DEFAULT_ESCAPE) -> list[Argument]:
        """Split the text after the keyword into whitespace-separated tokens.

        Continuations are spliced out of token values. An escape character
        followed by anything other than a line break is kept verbatim along
        with the character it escapes, so ``a\\ b`` stays a single token.
        """
        base = self.span.start
        cursor = Cursor(
            self.text_content,
            escape,
            offset=self.instruction_span.end - base,
        )
        args: list[Argument] = []
        while True:
            cursor.skip_inline_whitespace()
            while cursor.at_line_break():
                cursor.skip_line_break()
                cursor.skip_inline_whitespace()
            if cursor.done:
                return args
            start = cursor.offset
            chars: list[str] = []
            while not cursor.done:
                if cursor.skip_continuation():
                    continue
                ch = cursor.char
                if ch in INLINE_WHITESPACE or cursor.at_line_break():
                    break
                if ch == escape and cursor.peek():
                    chars.append(ch)
                    cursor.advance()
                    ch = cursor.char
                chars.append(ch)
                cursor.advance()
            end = cursor.offset
            # A trailing continuation is not part of the token.
            while end > start and self.text_content[end - 1] in "\r\n":
                end -= 1
                if end > start and self.text_content[end - 1] == escape:
                    end -= 1
            args.append(Argument("".join(chars), Span(base + start, base + end)))


@dataclass
class Dockerfile:
    """Parsed document: optional directive plus instructions in source order."""

    escape: str = DEFAULT_ESCAPE
    directive: Directive | None = None
    instructions: list[Instruction] = field(default_factory=list)

    @property
    def body_offset(self) -> int:
        return self.directive.span.end if self.directive is not None else 0
