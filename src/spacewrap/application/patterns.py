"""Ordered registry of protection rules."""

from __future__ import annotations

import re

from spacewrap.domain.normalization import ProtectionKind, ProtectionRule

_BLOCK_FLAGS = re.IGNORECASE | re.DOTALL
_LINE_FLAGS = re.MULTILINE

BLOCK_RULES: tuple[ProtectionRule, ...] = (
    ProtectionRule(
        kind=ProtectionKind.MULTILINE_BLOCK,
        pattern=re.compile(
            r"```[^`\n]*\n(?:(?!```).)*?\n```|~~~[^~\n]*\n(?:(?!~~~).)*?\n~~~",
            re.DOTALL,
        ),
    ),
    # Bodies stop at the next opener of the same kind, so an unclosed opener
    # costs one scan up to that opener rather than to the end of the text.
    ProtectionRule(
        kind=ProtectionKind.HTML_BLOCK,
        pattern=re.compile(
            r"<(pre|code|div|section|article|header|footer|nav|aside|main|figure)"
            r"(?:\s[^<>]*)?>(?:(?!<\1[\s>/]).)*?</\1>",
            _BLOCK_FLAGS,
        ),
    ),
    ProtectionRule(
        kind=ProtectionKind.HTML_BLOCK,
        pattern=re.compile(
            r"<(script|style)(?:\s[^<>]*)?>(?:(?!<\1[\s>/]).)*?</\1>",
            _BLOCK_FLAGS,
        ),
    ),
)

# Line-anchored rules. Horizontal-only classes keep every match on one line.
STRUCTURAL_RULES: tuple[ProtectionRule, ...] = (
    ProtectionRule(
        kind=ProtectionKind.MARKDOWN_HEADING,
        pattern=re.compile(r"^#{1,6}[ \t]+.*$", _LINE_FLAGS),
    ),
    ProtectionRule(
        kind=ProtectionKind.HTML_HEADING,
        pattern=re.compile(
            r"^<(h[1-6]|title)(?:[ \t][^>\n]*)?>.*?</\1>$",
            _LINE_FLAGS | re.IGNORECASE,
        ),
    ),
    ProtectionRule(
        kind=ProtectionKind.LIST_ITEM,
        pattern=re.compile(r"^[ \t]*(?:[*+\-]|\d+\.|[a-z]\.)[ \t]+.*$", _LINE_FLAGS),
    ),
    ProtectionRule(
        kind=ProtectionKind.HTML_LIST_ITEM,
        pattern=re.compile(
            r"^[ \t]*<li(?:[ \t][^>\n]*)?>.*?</li>$",
            _LINE_FLAGS | re.IGNORECASE,
        ),
    ),
    ProtectionRule(
        kind=ProtectionKind.BLOCKQUOTE,
        pattern=re.compile(r"^>[ \t]+.*$", _LINE_FLAGS),
    ),
    ProtectionRule(
        kind=ProtectionKind.HORIZONTAL_RULE,
        pattern=re.compile(r"^(?:\*\*\*|---|___)[ \t]*$", _LINE_FLAGS),
    ),
    ProtectionRule(
        kind=ProtectionKind.TABLE_ROW,
        pattern=re.compile(r"^\|.*\|$", _LINE_FLAGS),
    ),
    ProtectionRule(
        kind=ProtectionKind.HTML_TAG,
        pattern=re.compile(r"^</?[a-z][^>\n]*>$", _LINE_FLAGS | re.IGNORECASE),
    ),
)

# Inline rules may match several times per line. Path segments always start
# with a separator, so repetitions never overlap. An email local part only
# starts after a character that could not belong to it.
INLINE_RULES: tuple[ProtectionRule, ...] = (
    ProtectionRule(
        kind=ProtectionKind.URL,
        pattern=re.compile(r"https?://\S+|www\.[^\s.]+(?:\.[^\s.]+)+", re.IGNORECASE),
    ),
    ProtectionRule(
        kind=ProtectionKind.EMAIL,
        pattern=re.compile(r"(?<![\w.%+-])[\w.%+-]+@[\w-]+(?:\.[\w-]+)*\.[A-Za-z]{2,}\b"),
    ),
    ProtectionRule(
        kind=ProtectionKind.INLINE_CODE,
        pattern=re.compile(r"`[^`\n]+`"),
    ),
    ProtectionRule(
        kind=ProtectionKind.FILE_PATH,
        pattern=re.compile(r"(?:[A-Za-z]:)?(?:[\\/][\w.\-]+)+"),
    ),
)

DEFAULT_RULES: tuple[ProtectionRule, ...] = BLOCK_RULES + STRUCTURAL_RULES + INLINE_RULES
