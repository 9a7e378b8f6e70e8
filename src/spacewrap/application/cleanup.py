"""Final spacing cleanup after protected content is restored."""

from __future__ import annotations

import re
from collections.abc import Sequence

from spacewrap.application.protection import RestoredSegment
from spacewrap.application.text_normalizer import HORIZONTAL_SPACE

_SPACE_RUN_PATTERN = re.compile(r" {2,}")


def cleanup(lines: Sequence[Sequence[RestoredSegment]]) -> str:
    """Collapse stray spaces outside restored spans and drop trailing blank lines."""
    cleaned: list[tuple[str, bool]] = []
    for segments in lines:
        protected = any(segment.restored for segment in segments)
        cleaned.append((_clean_line(segments), protected))

    while cleaned and cleaned[-1][0] == "" and not cleaned[-1][1]:
        cleaned.pop()

    return "\n".join(text for text, _ in cleaned)


def _clean_line(segments: Sequence[RestoredSegment]) -> str:
    last_index = len(segments) - 1
    parts: list[str] = []
    for index, segment in enumerate(segments):
        if segment.restored:
            parts.append(segment.text)
            continue

        text = _SPACE_RUN_PATTERN.sub(" ", segment.text)
        if index == 0:
            text = text.lstrip(HORIZONTAL_SPACE)
        if index == last_index:
            text = text.rstrip(HORIZONTAL_SPACE)
        parts.append(text)
    return "".join(parts)
