"""Tests for the raw-text structural scanner."""

from __future__ import annotations

import logging

import pytest

from dockercheck.document import TextDocument
from dockercheck.keywords import DEFAULT_KEYWORDS
from dockercheck.models.settings import ValidatorSettings
from dockercheck.validation.context import ValidationContext
from dockercheck.validation.rules import RULES, BodyCheck, rule_for
from dockercheck.validation.scanner import StructuralScanner


def _scan(text: str, escape: str = "\\", body_offset: int = 0):
    ctx = ValidationContext(
        document=TextDocument(text),
        settings=ValidatorSettings(),
        keywords=frozenset(DEFAULT_KEYWORDS),
        escape=escape,
        body_offset=body_offset,
    )
    StructuralScanner(ctx).scan()
    return ctx.diagnostics


class TestDispatch:
    def test_rules_shared_between_passes(self) -> None:
        assert rule_for("VOLUME").body is BodyCheck.JSON_ARRAY
        assert rule_for("RUN").body is BodyCheck.REQUIRE_CONTENT
        for keyword in ("MAINTAINER", "FROM", "EXPOSE", "STOPSIGNAL", "USER", "WORKDIR"):
            assert RULES[keyword].body is BodyCheck.SKIP_LINE

    def test_lowercase_keyword_dispatches(self) -> None:
        assert len(_scan('volume ["a" "b"]')) == 1

    def test_keyword_spliced_across_continuation(self) -> None:
        assert len(_scan('VOL\\\nUME ["a" "b"]')) == 1


class TestComments:
    def test_comment_lines_are_skipped(self) -> None:
        assert _scan('# VOLUME ["a" "b"]\nFROM x') == []

    def test_comment_at_end_of_file(self) -> None:
        assert _scan("FROM x\n# trailing") == []

    def test_comment_does_not_continue(self) -> None:
        assert len(_scan('# note \\\nVOLUME ["a" "b"]')) == 1


class TestContinuations:
    def test_continued_instruction_body_is_skipped(self) -> None:
        text = 'RUN echo \\\n  VOLUME ["a" "b"]\nFROM x'
        assert _scan(text) == []

    def test_skip_line_honours_continuation(self) -> None:
        text = 'EXPOSE 80 \\\n  VOLUME ["a" "b"]\n'
        assert _scan(text) == []

    def test_backtick_escape(self) -> None:
        text = 'RUN a `\n VOLUME ["a" "b"]'
        assert _scan(text, escape="`") == []
        assert len(_scan(text, escape="\\")) == 1


class TestBailOut:
    def test_unknown_word_stops_scanning(self) -> None:
        text = 'FROM x\nBOGUS y\nVOLUME ["a" "b"]'
        assert _scan(text) == []

    def test_lines_before_unknown_word_are_checked(self) -> None:
        text = 'VOLUME ["a" "b"]\nBOGUS\nVOLUME [x]'
        assert len(_scan(text)) == 1

    def test_resumes_at_missing_comma(self) -> None:
        # '"b"]' is read as the next word, which ends the scan
        text = 'FROM node\nVOLUME ["a" "b"]\nVOLUME [x]\n'
        diagnostics = _scan(text)
        assert len(diagnostics) == 1
        assert diagnostics[0].range.start.line == 1
        assert diagnostics[0].range.start.character == 12

    def test_well_formed_array_continues_to_next_line(self) -> None:
        text = 'VOLUME ["a", "b"]\nVOLUME [x]\n'
        diagnostics = _scan(text)
        assert len(diagnostics) == 1
        assert diagnostics[0].range.start.line == 1

    def test_bail_out_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="dockercheck.validation.scanner"):
            _scan("BOGUS y")
        assert "stopping structural scan" in caplog.text


class TestBodyOffset:
    def test_scan_starts_after_directive(self) -> None:
        text = '# escape=`\nVOLUME ["a" "b"]'
        assert len(_scan(text, escape="`", body_offset=10)) == 1

    def test_empty_body_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="dockercheck.validation.scanner"):
            assert _scan("RUN   \nFROM x") == []
        assert "is empty" in caplog.text
