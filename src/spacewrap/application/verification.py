"""Integrity checks comparing original text with normalized output."""

from __future__ import annotations

from spacewrap.domain.normalization import TextStats, VerificationResult


def count_words(text: str) -> int:
    return len(text.split())


def count_lines(text: str) -> int:
    return len(text.split("\n")) if text else 0


def strip_whitespace(text: str) -> str:
    return "".join(text.split())


def verify(original: str, output: str) -> VerificationResult:
    """Compare word count, non-whitespace length and character coverage.

    Coverage only checks that every distinct non-whitespace character of the
    original still appears somewhere in the output. It is a set check, not a
    multiset or order check.
    """
    original_compact = strip_whitespace(original)
    output_compact = strip_whitespace(output)

    word_match = count_words(original) == count_words(output)
    char_match = len(original_compact) == len(output_compact)
    covered = set(original_compact) <= set(output_compact)

    return VerificationResult(
        word_match=word_match,
        char_match=char_match,
        content_match=word_match and char_match and covered,
    )


def compute_stats(original: str, output: str) -> TextStats:
    line_breaks_removed = count_lines(original) - count_lines(output)
    return TextStats(
        words_in=count_words(original),
        words_out=count_words(output),
        chars_in=len(original),
        chars_out=len(output),
        line_breaks_removed=max(line_breaks_removed, 0),
    )
