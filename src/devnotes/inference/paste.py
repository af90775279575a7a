# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from ..config import DEFAULT_THRESHOLDS, DetectionThresholds
from ..features import is_likely_code
from ..formatting import format_code_block
from ..schemas import PasteResult
from .language import classify_language
from .triggers import has_forced_language_marker


def _clamp(value: int, upper: int) -> int:
    return min(max(int(value), 0), upper)


def line_bounds(content: str, offset: int) -> tuple[int, int]:
    """Start and end offsets of the line of ``content`` holding ``offset``."""
    offset = _clamp(offset, len(content))
    start = content.rfind("\n", 0, offset) + 1
    end = content.find("\n", offset)
    if end == -1:
        end = len(content)
    return start, end


def current_line(content: str, offset: int) -> str:
    start, end = line_bounds(content, offset)
    return content[start:end]


def handle_paste(
    content: str,
    selection_start: int,
    selection_end: int,
    pasted: str,
    *,
    thresholds: DetectionThresholds = DEFAULT_THRESHOLDS,
) -> PasteResult:
    """Decide whether a paste becomes a fenced code block and apply it.

    A forced marker on the caret line consumes that whole line, marker
    included. Otherwise the block replaces the pasted-over selection.
    Unhandled pastes leave ``content`` untouched for the editor's default
    paste.
    """
    content = str(content or "")
    pasted = str(pasted or "")
    start = _clamp(selection_start, len(content))
    end = _clamp(selection_end, len(content))
    if end < start:
        start, end = end, start

    forced = has_forced_language_marker(current_line(content, start))
    if not forced and not is_likely_code(pasted, thresholds):
        return PasteResult(handled=False, content=content, cursor=end)

    language = classify_language(pasted)
    block = format_code_block(pasted, language)
    if forced:
        start, end = line_bounds(content, start)
    new_content = content[:start] + block + content[end:]
    return PasteResult(
        handled=True,
        content=new_content,
        cursor=start + len(block),
        language=language,
        forced=forced,
        block=block,
    )
