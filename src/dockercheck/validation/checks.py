"""Checks over the parsed instruction list."""

from __future__ import annotations

from dockercheck.parser.cursor import INLINE_WHITESPACE, LINE_BREAKS
from dockercheck.parser.nodes import Instruction
from dockercheck.validation.context import ValidationContext
from dockercheck.validation.rules import ArgumentRule, rule_for


def check_arguments_present(ctx: ValidationContext, instruction: Instruction) -> bool:
    """Report MISSING_ARGUMENT if nothing but whitespace follows the keyword.

    A continuation that runs into the end of the document counts as an
    argument, so a file cut off mid-instruction is not flagged.
    """
    span = instruction.arguments_span
    cursor = ctx.cursor(span.start, span.end)
    while not cursor.done:
        if cursor.skip_continuation():
            if cursor.offset >= len(ctx.text):
                return True
            continue
        ch = cursor.char
        if ch not in INLINE_WHITESPACE and ch not in LINE_BREAKS:
            return True
        cursor.advance()

    keyword = instruction.instruction_span
    ctx.report(ctx.factory.missing_argument(keyword.start, keyword.end))
    return False


def check_argument_rule(
    ctx: ValidationContext, instruction: Instruction, rule: ArgumentRule
) -> None:
    args = instruction.arguments(ctx.escape)
    if not args:
        return

    if rule.single_only:
        first = args[0]
        if not rule.predicate(first.value) and rule.diagnostic is not None:
            ctx.report(rule.diagnostic(ctx.factory, first))
        if len(args) > 1:
            extra = args[1].span
            ctx.report(ctx.factory.extra_argument(extra.start, extra.end))
        return

    for arg in args:
        if not rule.predicate(arg.value) and rule.diagnostic is not None:
            ctx.report(rule.diagnostic(ctx.factory, arg))


def check_source_image(ctx: ValidationContext, instructions: list[Instruction]) -> None:
    """The build must start from a base image."""
    if not instructions:
        ctx.report(ctx.factory.no_source_image(0, 0))
    elif instructions[0].keyword != "FROM":
        span = instructions[0].instruction_span
        ctx.report(ctx.factory.no_source_image(span.start, span.end))


def check_instruction(ctx: ValidationContext, instruction: Instruction) -> None:
    span = instruction.instruction_span
    keyword = instruction.keyword

    if keyword not in ctx.keywords:
        ctx.report(ctx.factory.unknown_instruction(span.start, span.end, keyword))
        return
    if keyword != instruction.instruction:
        ctx.report(ctx.factory.uppercase_instruction(span.start, span.end))
        return

    rule = rule_for(keyword)
    if rule.deprecated:
        diagnostic = ctx.factory.maintainer_deprecated(
            ctx.settings.deprecated_maintainer, span.start, span.start
        )
        if diagnostic is not None:
            ctx.report(diagnostic)

    if check_arguments_present(ctx, instruction) and rule.arguments is not None:
        check_argument_rule(ctx, instruction, rule.arguments)


def check_instructions(ctx: ValidationContext, instructions: list[Instruction]) -> None:
    """Run the document-model pass over every instruction in source order."""
    check_source_image(ctx, instructions)
    for instruction in instructions:
        check_instruction(ctx, instruction)
