# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Note-taking core: code detection, language classification and paste handling."""

from .config import DEFAULT_THRESHOLDS, DetectionThresholds
from .features import detect_code, is_likely_code
from .formatting import extract_code_blocks, format_code_block, wrap_code_block
from .inference.language import classify_language
from .inference.paste import handle_paste
from .inference.triggers import has_forced_language_marker
from .schemas import CodeBlock, DetectionVerdict, LanguageTag, Note, PasteResult

__all__ = [
    "DEFAULT_THRESHOLDS",
    "DetectionThresholds",
    "detect_code",
    "is_likely_code",
    "classify_language",
    "has_forced_language_marker",
    "handle_paste",
    "format_code_block",
    "wrap_code_block",
    "extract_code_blocks",
    "LanguageTag",
    "DetectionVerdict",
    "CodeBlock",
    "PasteResult",
    "Note",
]
