"""Dockerfile parsing: continuation-aware cursor and document model."""

from dockercheck.parser.cursor import Cursor
from dockercheck.parser.dockerfile import DockerfileParser
from dockercheck.parser.nodes import Argument, Directive, Dockerfile, Instruction, Span

__all__ = [
    "Argument",
    "Cursor",
    "Directive",
    "Dockerfile",
    "DockerfileParser",
    "Instruction",
    "Span",
]
