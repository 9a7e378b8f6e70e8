"""Line-restructuring strategies applied to normalized, token-bearing text."""

from __future__ import annotations

from typing import assert_never

from spacewrap.application.text_normalizer import strip_horizontal
from spacewrap.application.tokens import is_protected_line
from spacewrap.domain.normalization import Mode


def apply_mode(mode: Mode, text: str) -> str:
    """Restructure lines according to the selected mode."""
    lines = text.split("\n")
    match mode:
        case Mode.SINGLE_PARAGRAPH:
            result = _single_paragraph(lines)
        case Mode.CLEAN_PARAGRAPH:
            result = _clean_paragraph(lines)
        case Mode.HARD_NORMALIZE:
            result = _hard_normalize(lines)
        case _:
            assert_never(mode)
    return "\n".join(result)


def _single_paragraph(lines: list[str]) -> list[str]:
    emitted: list[str] = []
    run: list[str] = []

    for line in lines:
        stripped = strip_horizontal(line)
        if is_protected_line(line):
            _flush_run(run, emitted)
            emitted.append(line)
        elif not stripped:
            _flush_run(run, emitted)
            if emitted and emitted[-1] != "":
                emitted.append("")
        else:
            run.append(stripped)

    _flush_run(run, emitted)
    return _strip_blank_edges(emitted)


def _clean_paragraph(lines: list[str]) -> list[str]:
    emitted: list[str] = []
    run: list[str] = []

    for line in lines:
        stripped = strip_horizontal(line)
        if not stripped:
            _flush_run(run, emitted)
            emitted.append("")
        elif is_protected_line(line):
            _flush_run(run, emitted)
            emitted.append(line)
        else:
            run.append(stripped)
    _flush_run(run, emitted)

    collapsed: list[str] = []
    previous_blank = False
    for line in emitted:
        if line == "":
            if not previous_blank:
                collapsed.append("")
            previous_blank = True
            continue
        collapsed.append(line)
        previous_blank = False

    return _strip_blank_edges(collapsed)


def _hard_normalize(lines: list[str]) -> list[str]:
    emitted: list[str] = []
    run: list[str] = []

    for line in lines:
        if is_protected_line(line):
            _flush_run(run, emitted)
            emitted.append(line)
            continue
        stripped = strip_horizontal(line)
        if stripped:
            run.append(stripped)
    _flush_run(run, emitted)

    fused: list[str] = []
    for line in emitted:
        if is_protected_line(line):
            fused.append(line)
        elif fused and not is_protected_line(fused[-1]):
            fused[-1] = f"{fused[-1]} {line}"
        else:
            fused.append(line)
    return fused


def _flush_run(run: list[str], emitted: list[str]) -> None:
    if run:
        emitted.append(" ".join(run))
        run.clear()


def _strip_blank_edges(lines: list[str]) -> list[str]:
    start = 0
    end = len(lines)
    while start < end and lines[start] == "":
        start += 1
    while end > start and lines[end - 1] == "":
        end -= 1
    return lines[start:end]
