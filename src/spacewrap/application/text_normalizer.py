"""Whitespace normalization that leaves protected lines untouched."""

from __future__ import annotations

import re

from spacewrap.application.tokens import is_protected_line

HORIZONTAL_SPACE = (
    " \t\f\v\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)
_HORIZONTAL_SPACE_PATTERN = re.compile(f"[{HORIZONTAL_SPACE}]+")


def normalize_line_endings(text: str) -> str:
    return text.replace("\r\n", "\n").replace("\r", "\n")


def normalize_whitespace(text: str) -> str:
    """Collapse horizontal whitespace on plain lines.

    Lines carrying a placeholder pass through verbatim. Blank lines are kept
    as empty strings; how many of them survive is decided by the mode.
    """
    normalized_lines: list[str] = []
    for line in normalize_line_endings(text).split("\n"):
        if is_protected_line(line):
            normalized_lines.append(line)
            continue

        compact = _HORIZONTAL_SPACE_PATTERN.sub(" ", line).rstrip(" ")
        normalized_lines.append(compact)

    return "\n".join(normalized_lines)


def strip_horizontal(text: str) -> str:
    return text.strip(HORIZONTAL_SPACE)


def is_blank(text: str) -> bool:
    """Return True when text holds only line breaks and horizontal spaces."""
    return not text.strip(HORIZONTAL_SPACE + "\r\n")
