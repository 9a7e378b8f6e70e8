"""Application use-case running the protect/normalize/restore pipeline."""

from __future__ import annotations

import logging
from bisect import bisect_left
from dataclasses import dataclass
from uuid import uuid4

from spacewrap.application.cleanup import cleanup
from spacewrap.application.modes import apply_mode
from spacewrap.application.protection import (
    ProtectionContext,
    find_block_spans,
    protect,
    restore_lines,
)
from spacewrap.application.text_normalizer import (
    is_blank,
    normalize_line_endings,
    normalize_whitespace,
)
from spacewrap.application.tokens import TOKEN_PREFIX_PATTERN
from spacewrap.application.verification import compute_stats, verify
from spacewrap.domain.errors import IntegrityDefect
from spacewrap.domain.normalization import (
    Mode,
    ProcessingResult,
    TextStats,
    VerificationResult,
    VerificationWarning,
)

LOGGER = logging.getLogger(__name__)
BATCH_SEPARATOR = "\n\n"


@dataclass(frozen=True)
class ProcessTextCommand:
    """Input contract for one normalization call."""

    content: str
    mode: Mode | str = Mode.SINGLE_PARAGRAPH


class ProcessTextUseCase:
    """Normalize whitespace batch by batch and verify the result."""

    def execute(self, command: ProcessTextCommand) -> ProcessingResult:
        """Process raw text; unknown modes are rejected before any work starts."""
        mode = Mode.parse(command.mode)
        correlation_id = str(uuid4())
        raw_text = command.content

        if is_blank(raw_text):
            LOGGER.info(
                "event=text_process_skipped correlation_id=%s mode=%s reason=empty_input",
                correlation_id,
                mode.value,
            )
            return ProcessingResult(
                output="",
                mode=mode,
                stats=TextStats(),
                verification=VerificationResult(),
            )

        try:
            output, batch_count = self._run_pipeline(raw_text, mode)
        except IntegrityDefect as defect:
            LOGGER.exception(
                (
                    "event=text_process_integrity_defect correlation_id=%s "
                    "mode=%s token=%s input_length=%s"
                ),
                correlation_id,
                mode.value,
                defect.token,
                len(raw_text),
            )
            return ProcessingResult(
                output=raw_text,
                mode=mode,
                stats=compute_stats(raw_text, raw_text),
                verification=verify(raw_text, raw_text),
                error=defect,
            )

        stats = compute_stats(raw_text, output)
        verification = verify(raw_text, output)
        warnings: tuple[VerificationWarning, ...] = ()
        if not verification.passed:
            warnings = (
                VerificationWarning(
                    message="Content verification failed. Review the output before using it.",
                    result=verification,
                ),
            )
            LOGGER.warning(
                (
                    "event=text_verification_mismatch correlation_id=%s mode=%s "
                    "word_match=%s char_match=%s content_match=%s"
                ),
                correlation_id,
                mode.value,
                verification.word_match,
                verification.char_match,
                verification.content_match,
            )

        LOGGER.info(
            (
                "event=text_process_completed correlation_id=%s mode=%s batches=%s "
                "words_in=%s words_out=%s chars_in=%s chars_out=%s line_breaks_removed=%s"
            ),
            correlation_id,
            mode.value,
            batch_count,
            stats.words_in,
            stats.words_out,
            stats.chars_in,
            stats.chars_out,
            stats.line_breaks_removed,
        )
        return ProcessingResult(
            output=output,
            mode=mode,
            stats=stats,
            verification=verification,
            batch_count=batch_count,
            warnings=warnings,
        )

    def _run_pipeline(self, raw_text: str, mode: Mode) -> tuple[str, int]:
        text = normalize_line_endings(raw_text)
        collision = TOKEN_PREFIX_PATTERN.search(text)
        if collision is not None:
            raise IntegrityDefect(collision.group(0))

        context = ProtectionContext()
        batches = split_into_batches(text)
        processed = [_process_batch(batch, mode, context) for batch in batches]
        return BATCH_SEPARATOR.join(processed), len(batches)


def process_text(raw_input: str, mode: Mode | str = Mode.SINGLE_PARAGRAPH) -> ProcessingResult:
    """Normalize raw input with the given mode."""
    return ProcessTextUseCase().execute(ProcessTextCommand(content=raw_input, mode=mode))


def split_into_batches(text: str) -> list[str]:
    """Split text on whitespace-only lines that are not inside a multi-line block."""
    block_spans = find_block_spans(text)
    block_starts = [start for start, _ in block_spans]
    batches: list[str] = []
    current: list[str] = []
    offset = 0

    for line in text.split("\n"):
        line_start = offset
        offset += len(line) + 1
        if is_blank(line) and not _inside_block(line_start, block_starts, block_spans):
            if current:
                batches.append("\n".join(current))
                current = []
            continue
        current.append(line)

    if current:
        batches.append("\n".join(current))
    return [batch for batch in batches if not is_blank(batch)]


def _inside_block(position: int, starts: list[int], spans: list[tuple[int, int]]) -> bool:
    index = bisect_left(starts, position) - 1
    return index >= 0 and position < spans[index][1]


def _process_batch(batch: str, mode: Mode, context: ProtectionContext) -> str:
    protected_text = protect(batch, context)
    normalized = normalize_whitespace(protected_text)
    restructured = apply_mode(mode, normalized)
    return cleanup(restore_lines(restructured, context.table))
