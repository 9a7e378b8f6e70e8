"""Domain models for whitespace normalization runs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from spacewrap.domain.errors import ConfigError, IntegrityDefect


class Mode(StrEnum):
    """Line-restructuring policy applied after whitespace normalization."""

    SINGLE_PARAGRAPH = "single_paragraph"
    CLEAN_PARAGRAPH = "clean_paragraph"
    HARD_NORMALIZE = "hard_normalize"

    @classmethod
    def parse(cls, value: Mode | str) -> Mode:
        """Resolve mode from enum, value, member name or legacy A/B/C selector."""
        if isinstance(value, Mode):
            return value
        if not isinstance(value, str):
            raise ConfigError(f"Unsupported mode type: {type(value).__name__}")

        key = value.strip().lower()
        resolved = _MODE_ALIASES.get(key)
        if resolved is None:
            raise ConfigError(f"Unknown normalization mode: {value!r}")
        return resolved


_MODE_ALIASES: dict[str, Mode] = {
    **{mode.value: mode for mode in Mode},
    **{mode.name.lower(): mode for mode in Mode},
    "a": Mode.SINGLE_PARAGRAPH,
    "b": Mode.CLEAN_PARAGRAPH,
    "c": Mode.HARD_NORMALIZE,
    "singlepara": Mode.SINGLE_PARAGRAPH,
    "cleanpara": Mode.CLEAN_PARAGRAPH,
    "hardnormalize": Mode.HARD_NORMALIZE,
}


class TokenClass(StrEnum):
    """Namespace of placeholder tokens."""

    STRUCT = "STRUCT"
    BLOCK = "BLOCK"


class ProtectionKind(StrEnum):
    """Kind of content shielded from whitespace collapsing."""

    URL = "url"
    EMAIL = "email"
    INLINE_CODE = "inline_code"
    FILE_PATH = "file_path"
    MARKDOWN_HEADING = "markdown_heading"
    HTML_HEADING = "html_heading"
    LIST_ITEM = "list_item"
    HTML_LIST_ITEM = "html_list_item"
    BLOCKQUOTE = "blockquote"
    HORIZONTAL_RULE = "horizontal_rule"
    TABLE_ROW = "table_row"
    HTML_TAG = "html_tag"
    MULTILINE_BLOCK = "multiline_block"
    HTML_BLOCK = "html_block"

    @property
    def token_class(self) -> TokenClass:
        if self in (ProtectionKind.MULTILINE_BLOCK, ProtectionKind.HTML_BLOCK):
            return TokenClass.BLOCK
        return TokenClass.STRUCT


@dataclass(frozen=True)
class ProtectionRule:
    """Compiled pattern bound to the kind of content it protects."""

    kind: ProtectionKind
    pattern: re.Pattern[str]


class TextStats(BaseModel):
    """Counters shown next to input and output text."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    words_in: int = Field(default=0, ge=0)
    words_out: int = Field(default=0, ge=0)
    chars_in: int = Field(default=0, ge=0)
    chars_out: int = Field(default=0, ge=0)
    line_breaks_removed: int = Field(default=0, ge=0)


class VerificationResult(BaseModel):
    """Outcome of comparing original and normalized text."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    word_match: bool = True
    char_match: bool = True
    content_match: bool = True

    @property
    def passed(self) -> bool:
        return self.word_match and self.char_match and self.content_match


@dataclass(frozen=True)
class VerificationWarning:
    """Informational signal that integrity checks disagree."""

    message: str
    result: VerificationResult


@dataclass(frozen=True)
class ProcessingResult:
    """Output of one processing call together with stats and verification."""

    output: str
    mode: Mode
    stats: TextStats
    verification: VerificationResult
    batch_count: int = 0
    warnings: tuple[VerificationWarning, ...] = ()
    error: IntegrityDefect | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
