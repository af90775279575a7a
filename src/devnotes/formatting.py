# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re

from .features import FENCE
from .inference.language import classify_language
from .schemas import CodeBlock, LanguageTag

FENCED_BLOCK_RE = re.compile(r"^```([^\n`]*)\n(.*?)\n?^```[ \t]*$", flags=re.MULTILINE | re.DOTALL)


def format_code_block(code: str, language: str | None = None) -> str:
    clean_code = str(code or "").strip()
    if not language:
        language = classify_language(clean_code)
    return f"{FENCE}{language}\n{clean_code}\n{FENCE}"


wrap_code_block = format_code_block


def extract_code_blocks(content: str) -> list[CodeBlock]:
    blocks: list[CodeBlock] = []
    for match in FENCED_BLOCK_RE.finditer(str(content or "")):
        language = match.group(1).strip() or LanguageTag.TEXT.value
        blocks.append(CodeBlock(language=language, code=match.group(2)))
    return blocks


def contains_code(content: str) -> bool:
    return FENCE in str(content or "")
