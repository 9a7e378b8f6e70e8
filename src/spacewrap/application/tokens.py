"""Placeholder token format shared by every pipeline stage."""

from __future__ import annotations

import re

from spacewrap.domain.normalization import TokenClass

MARKER_PREFIX = "__MARKER_"
TOKEN_PATTERN = re.compile(r"__MARKER_(?:STRUCT|BLOCK)_\d+__")
# Raw text matching this could complete a real token placed right after it.
TOKEN_PREFIX_PATTERN = re.compile(r"__MARKER_(?:STRUCT|BLOCK)_\d")


def format_token(token_class: TokenClass, token_id: int) -> str:
    return f"{MARKER_PREFIX}{token_class.value}_{token_id}__"


def contains_marker(text: str) -> bool:
    return MARKER_PREFIX in text


def is_protected_line(line: str) -> bool:
    """Return True when the line carries a placeholder anywhere.

    Mixed lines (prose next to a token) count as protected as a whole and are
    never merged with their neighbours.
    """
    return contains_marker(line)
