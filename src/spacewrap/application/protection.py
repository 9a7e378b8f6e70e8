"""Reversible tokenization of content that must survive normalization."""

from __future__ import annotations

import logging
import re
from bisect import bisect_left
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from spacewrap.application.patterns import BLOCK_RULES, DEFAULT_RULES
from spacewrap.application.tokens import TOKEN_PATTERN, contains_marker, format_token
from spacewrap.domain.errors import IntegrityDefect
from spacewrap.domain.normalization import ProtectionKind, ProtectionRule, TokenClass

LOGGER = logging.getLogger(__name__)


@dataclass
class ProtectionContext:
    """Token counter and protection table owned by one processing call."""

    table: dict[str, str] = field(default_factory=dict)
    next_token_id: int = 1

    def issue(self, kind: ProtectionKind, original: str) -> str:
        """Register original substring and return its placeholder token."""
        token = format_token(kind.token_class, self.next_token_id)
        self.next_token_id += 1
        self.table[token] = original
        return token


class RestoredSegment(NamedTuple):
    """Piece of a restored line; restored pieces are never rewritten."""

    text: str
    restored: bool


def protect(
    text: str,
    context: ProtectionContext,
    rules: Sequence[ProtectionRule] = DEFAULT_RULES,
) -> str:
    """Replace every rule match with a placeholder token.

    Block rules always run before line and inline rules, so a multi-line
    construct is tokenized whole before single-line rules can see inside it.
    Rule order is otherwise kept as given.
    """
    ordered_rules = sorted(
        rules,
        key=lambda rule: rule.kind.token_class is not TokenClass.BLOCK,
    )
    protected_text = text
    for rule in ordered_rules:
        protected_text = rule.pattern.sub(
            lambda match, kind=rule.kind: _protect_match(match, kind, context),
            protected_text,
        )
    return protected_text


def _protect_match(match: re.Match[str], kind: ProtectionKind, context: ProtectionContext) -> str:
    original = match.group(0)
    if contains_marker(original):
        return original
    return context.issue(kind, original)


def find_block_spans(text: str) -> list[tuple[int, int]]:
    """Return non-overlapping (start, end) offsets of multi-line block matches."""
    spans: list[tuple[int, int]] = []
    for rule in BLOCK_RULES:
        taken = sorted(spans)
        taken_starts = [start for start, _ in taken]
        for match in rule.pattern.finditer(text):
            start, end = match.span()
            if _overlaps_taken(start, end, taken_starts, taken):
                continue
            spans.append((start, end))
    return sorted(spans)


def _overlaps_taken(
    start: int, end: int, taken_starts: list[int], taken: list[tuple[int, int]]
) -> bool:
    # Taken spans are disjoint and sorted, so their ends ascend with their starts.
    index = bisect_left(taken_starts, end)
    return index > 0 and taken[index - 1][1] > start


def restore(text: str, table: dict[str, str]) -> str:
    """Substitute every placeholder in text with its original substring."""
    return TOKEN_PATTERN.sub(lambda match: _lookup(match.group(0), table), text)


def restore_lines(text: str, table: dict[str, str]) -> list[list[RestoredSegment]]:
    """Restore text line by line, keeping track of which pieces were protected."""
    restored_lines: list[list[RestoredSegment]] = []
    for line in text.split("\n"):
        segments: list[RestoredSegment] = []
        position = 0
        for match in TOKEN_PATTERN.finditer(line):
            if match.start() > position:
                segments.append(RestoredSegment(line[position : match.start()], restored=False))
            segments.append(RestoredSegment(_lookup(match.group(0), table), restored=True))
            position = match.end()
        if position < len(line):
            segments.append(RestoredSegment(line[position:], restored=False))
        restored_lines.append(segments)
    return restored_lines


def _lookup(token: str, table: dict[str, str]) -> str:
    original = table.get(token)
    if original is None:
        LOGGER.error("event=token_unresolved token=%s table_size=%s", token, len(table))
        raise IntegrityDefect(token)
    return original
