"""Build the Dockerfile document model from raw text."""

from __future__ import annotations

import re

from dockercheck.document import TextDocument
from dockercheck.parser.cursor import DEFAULT_ESCAPE, WHITESPACE, Cursor
from dockercheck.parser.nodes import Directive, Dockerfile, Instruction, Span

# ``# name = value`` on the first line. Group spans give the name/value ranges.
_DIRECTIVE_RE = re.compile(r"^[ \t]*#[ \t]*([A-Za-z][\w-]*)[ \t]*=[ \t]*(.*?)[ \t]*$")


class DockerfileParser:
    """Parses a document into a :class:`Dockerfile`.

    Only the first line may hold a directive; a ``# key=value`` comment
    anywhere else is just a comment. The escape character selected by the
    directive is used to join continuation lines into logical instructions.
    """

    def parse(self, document: TextDocument | str) -> Dockerfile:
        text = document.get_text() if isinstance(document, TextDocument) else document
        directive = self.parse_directive(text)
        escape = directive.escape_char if directive is not None else DEFAULT_ESCAPE
        dockerfile = Dockerfile(escape=escape, directive=directive)

        cursor = Cursor(text, escape, offset=dockerfile.body_offset)
        while not cursor.done:
            ch = cursor.char
            if ch in WHITESPACE:
                cursor.advance()
                continue
            if ch == "#":
                cursor.skip_to_line_break()
                continue
            instruction = self._parse_instruction(cursor)
            if instruction is not None:
                dockerfile.instructions.append(instruction)
        return dockerfile

    @staticmethod
    def parse_directive(text: str) -> Directive | None:
        line_end = len(text)
        for i, ch in enumerate(text):
            if ch in "\r\n":
                line_end = i
                break
        match = _DIRECTIVE_RE.match(text[:line_end])
        if match is None:
            return None
        raw_name, value = match.group(1), match.group(2)
        return Directive(
            name=raw_name.lower(),
            raw_name=raw_name,
            value=value,
            span=Span(0, line_end),
            name_span=Span(match.start(1), match.end(1)),
            value_span=Span(match.start(2), match.end(2)),
        )

    @staticmethod
    def _parse_instruction(cursor: Cursor) -> Instruction | None:
        start = cursor.offset
        written, keyword_end = cursor.read_word()
        if not written:
            # a bare continuation; resume at whatever follows it
            return None
        cursor.skip_to_line_break()
        end = cursor.offset
        return Instruction(
            keyword=written.upper(),
            instruction=written,
            text_content=cursor.text[start:end],
            span=Span(start, end),
            instruction_span=Span(start, keyword_end),
        )
