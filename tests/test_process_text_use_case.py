"""Unit tests for ProcessTextUseCase and batch orchestration."""

from __future__ import annotations

import time

import pytest

from spacewrap.application import process_text_use_case
from spacewrap.application.process_text_use_case import (
    ProcessTextCommand,
    ProcessTextUseCase,
    process_text,
    split_into_batches,
)
from spacewrap.application.tokens import MARKER_PREFIX
from spacewrap.domain.errors import ConfigError, IntegrityDefect
from spacewrap.domain.normalization import Mode, TextStats

SAMPLE_DOCUMENT = (
    "# Title\n"
    "\n"
    "Some   text that\n"
    "wraps across lines with `inline   code`.\n"
    "\n"
    "- item one\n"
    "- item two\n"
    "\n"
    "\n"
    "Contact: john@example.com or visit www.example.org today.\n"
    "Plain   closing\twords\n"
    "on two lines."
)


def test_collapses_each_batch_and_joins_with_single_blank_line() -> None:
    result = process_text("Hello    world\n\nThis   is   a test.", Mode.SINGLE_PARAGRAPH)

    assert result.output == "Hello world\n\nThis is a test."
    assert result.batch_count == 2
    assert result.ok
    assert result.verification.passed
    assert result.warnings == ()


@pytest.mark.parametrize("mode", list(Mode))
def test_url_is_preserved_and_surrounding_spaces_collapse(mode: Mode) -> None:
    result = process_text("Visit https://example.com/path  now", mode)

    assert result.output == "Visit https://example.com/path now"


def test_clean_paragraph_keeps_one_blank_line_between_paragraphs() -> None:
    raw_text = "First paragraph line.\n\n\n\nSecond paragraph line."

    result = process_text(raw_text, Mode.CLEAN_PARAGRAPH)

    assert result.output == "First paragraph line.\n\nSecond paragraph line."


def test_hard_normalize_joins_all_plain_lines() -> None:
    result = process_text("line1\nline2\nline3", Mode.HARD_NORMALIZE)

    assert result.output == "line1 line2 line3"
    assert result.stats.line_breaks_removed == 2


@pytest.mark.parametrize("mode", list(Mode))
@pytest.mark.parametrize("raw_text", ["", "   ", " \n\t\n  \r\n"])
def test_empty_input_returns_empty_output_without_processing(raw_text: str, mode: Mode) -> None:
    result = process_text(raw_text, mode)

    assert result.output == ""
    assert result.stats == TextStats()
    assert result.batch_count == 0
    assert result.verification.passed
    assert result.ok


def test_unknown_mode_is_rejected_before_processing() -> None:
    with pytest.raises(ConfigError, match="Unknown normalization mode"):
        process_text("some text", "Z")


def test_legacy_mode_selector_is_accepted() -> None:
    result = ProcessTextUseCase().execute(ProcessTextCommand(content="a\nb", mode="C"))

    assert result.mode is Mode.HARD_NORMALIZE
    assert result.output == "a b"


def test_fenced_block_with_blank_line_survives_verbatim() -> None:
    block = "```python\ndef f():\n\n    return  1\n```"
    raw_text = f"Intro   text\n{block}\nAfter    text"

    result = process_text(raw_text, Mode.SINGLE_PARAGRAPH)

    assert result.output == f"Intro text\n{block}\nAfter text"
    assert result.batch_count == 1


def test_html_block_survives_verbatim() -> None:
    block = '<div class="note">\n  keep   this\n\n  spacing\n</div>'
    raw_text = f"before\ntext\n{block}"

    result = process_text(raw_text, Mode.HARD_NORMALIZE)

    assert result.output == f"before text\n{block}"


def test_structural_lines_keep_their_own_lines() -> None:
    raw_text = "Shopping list:\n- milk\n- eggs\nthat is\nall"

    result = process_text(raw_text, Mode.SINGLE_PARAGRAPH)

    assert result.output == "Shopping list:\n- milk\n- eggs\nthat is all"


def test_crlf_input_is_normalized() -> None:
    result = process_text("one\r\ntwo\r\n\r\nthree", Mode.SINGLE_PARAGRAPH)

    assert result.output == "one two\n\nthree"


def test_token_lookalike_in_input_falls_back_to_original_text() -> None:
    raw_text = "literal __MARKER_STRUCT_1__   text\nmore"

    result = process_text(raw_text, Mode.SINGLE_PARAGRAPH)

    assert result.output == raw_text
    assert isinstance(result.error, IntegrityDefect)
    assert result.error.token == "__MARKER_STRUCT_1__"
    assert not result.ok


def test_partial_token_lookalike_next_to_protected_span_falls_back() -> None:
    raw_text = "__MARKER_STRUCT_1`x`"

    result = process_text(raw_text, Mode.SINGLE_PARAGRAPH)

    assert result.output == raw_text
    assert isinstance(result.error, IntegrityDefect)
    assert result.error.token == "__MARKER_STRUCT_1"
    assert not result.ok


def test_verification_mismatch_returns_output_with_warning(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(process_text_use_case, "cleanup", lambda lines: "tampered")

    result = process_text("hello world", Mode.SINGLE_PARAGRAPH)

    assert result.output == "tampered"
    assert not result.verification.passed
    assert len(result.warnings) == 1
    assert result.warnings[0].result == result.verification
    assert result.ok


def test_split_into_batches_drops_whitespace_only_separators() -> None:
    batches = split_into_batches("a\n  \n\t\n\nb\nc\n\n")

    assert batches == ["a", "b\nc"]


def test_split_into_batches_keeps_control_separator_lines_as_content() -> None:
    batches = split_into_batches("a\n\x1c\n\nb\x85")

    assert batches == ["a\n\x1c", "b\x85"]


@pytest.mark.parametrize("mode", list(Mode))
def test_processing_is_idempotent(mode: Mode) -> None:
    once = process_text(SAMPLE_DOCUMENT, mode).output

    twice = process_text(once, mode).output

    assert twice == once


@pytest.mark.parametrize("mode", list(Mode))
def test_output_covers_input_characters_and_has_no_markers(mode: Mode) -> None:
    result = process_text(SAMPLE_DOCUMENT, mode)

    assert set("".join(SAMPLE_DOCUMENT.split())) <= set("".join(result.output.split()))
    assert MARKER_PREFIX not in result.output
    assert result.verification.passed


@pytest.mark.parametrize("mode", list(Mode))
def test_batches_are_processed_independently(mode: Mode) -> None:
    first = "alpha   beta\ngamma see /usr/local/bin"
    second = "- one\n- two\ndelta  epsilon\nzeta"

    separately = f"{process_text(first, mode).output}\n\n{process_text(second, mode).output}"
    together = process_text(f"{first}\n\n\n{second}", mode).output

    assert together == separately


@pytest.mark.parametrize("mode", list(Mode))
def test_protected_inline_content_is_kept_character_for_character(mode: Mode) -> None:
    raw_text = "Mail  me at first.last+tag@example.co.uk\nand run `git  status`   please"

    result = process_text(raw_text, mode)

    assert "first.last+tag@example.co.uk" in result.output
    assert "`git  status`" in result.output
    assert "   please" not in result.output


def test_sample_document_single_paragraph_output() -> None:
    result = process_text(SAMPLE_DOCUMENT, Mode.SINGLE_PARAGRAPH)

    assert result.output == (
        "# Title\n"
        "\n"
        "Some text that\n"
        "wraps across lines with `inline   code`.\n"
        "\n"
        "- item one\n"
        "- item two\n"
        "\n"
        "Contact: john@example.com or visit www.example.org today.\n"
        "Plain closing words on two lines."
    )
    assert result.batch_count == 4


def test_blank_line_inside_fence_keeps_block_in_one_batch() -> None:
    first = "```\na"
    second = "b\n```"

    together = process_text(f"{first}\n\n{second}", Mode.SINGLE_PARAGRAPH)
    separately = [process_text(part, Mode.SINGLE_PARAGRAPH).output for part in (first, second)]

    assert together.output == "```\na\n\nb\n```"
    assert together.batch_count == 1
    assert separately == ["``` a", "b ```"]


@pytest.mark.parametrize(
    "raw_text",
    [
        "a." * 40000,
        "<div>" * 20000,
        "<script " * 20000,
        "x```\n" * 20000,
        "<pre>\nx\n</pre>\n\n" * 10000,
    ],
)
def test_pathological_input_is_processed_in_bounded_time(raw_text: str) -> None:
    started = time.perf_counter()

    result = process_text(raw_text, Mode.SINGLE_PARAGRAPH)

    assert time.perf_counter() - started < 5.0
    assert result.ok
    assert result.verification.passed


def test_control_separators_are_not_treated_as_spaces() -> None:
    raw_text = "\x1ca  b\x85\n\x1f"

    result = process_text(raw_text, Mode.HARD_NORMALIZE)

    assert result.output == "\x1ca b\x85 \x1f"
    assert result.verification.passed
