"""Unit tests for whitespace normalization."""

from __future__ import annotations

from spacewrap.application.text_normalizer import (
    is_blank,
    normalize_line_endings,
    normalize_whitespace,
    strip_horizontal,
)


def test_normalize_whitespace_collapses_spaces_and_tabs() -> None:
    raw_text = "Hello \t  world   \nsecond\t\tline\t"

    normalized = normalize_whitespace(raw_text)

    assert normalized == "Hello world\nsecond line"


def test_normalize_whitespace_replaces_unicode_space_separators() -> None:
    raw_text = "non\u00a0breaking\u2003em\u3000ideographic\u202fnarrow"

    normalized = normalize_whitespace(raw_text)

    assert normalized == "non breaking em ideographic narrow"


def test_normalize_whitespace_keeps_protected_lines_verbatim() -> None:
    raw_text = "keep  __MARKER_STRUCT_1__\t spacing  \nplain   line"

    normalized = normalize_whitespace(raw_text)

    assert normalized == "keep  __MARKER_STRUCT_1__\t spacing  \nplain line"


def test_normalize_whitespace_leaves_blank_lines_for_modes() -> None:
    raw_text = "first\n\n   \n\t\nsecond"

    normalized = normalize_whitespace(raw_text)

    assert normalized == "first\n\n\n\nsecond"


def test_normalize_line_endings_unifies_crlf_and_cr() -> None:
    assert normalize_line_endings("a\r\nb\rc\n") == "a\nb\nc\n"


def test_normalize_whitespace_keeps_control_separators() -> None:
    raw_text = "a\x1c\nb \x85\n\x1f  c"

    normalized = normalize_whitespace(raw_text)

    assert normalized == "a\x1c\nb \x85\n\x1f c"


def test_strip_horizontal_only_removes_space_characters() -> None:
    assert strip_horizontal("\u3000 \x1ea\x1d\t\u00a0") == "\x1ea\x1d"


def test_is_blank_ignores_line_breaks_and_spaces_only() -> None:
    assert is_blank(" \t\r\n\u2003")
    assert not is_blank("\n\x1e\n")
