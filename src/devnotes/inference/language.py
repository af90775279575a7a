# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import re

from ..schemas import LanguageTag

# First match wins. TypeScript must stay ahead of JavaScript: the JavaScript
# keyword set would otherwise shadow every typed snippet.
LANGUAGE_RULES: tuple[tuple[re.Pattern[str], LanguageTag], ...] = (
    (
        re.compile(r"\b(interface|type|as|implements|extends|namespace|tsx?)\b", flags=re.IGNORECASE),
        LanguageTag.TYPESCRIPT,
    ),
    (
        re.compile(r"\b(function|const|let|var|import|export|console\.log|React|useState|useEffect)\b|=>"),
        LanguageTag.JAVASCRIPT,
    ),
    (
        re.compile(r"\b(def|class|import|from|print|if __name__|lambda|pip|python)\b", flags=re.IGNORECASE),
        LanguageTag.PYTHON,
    ),
    (
        re.compile(r"\b(public|private|class|static|void|String|int|System\.out|main)\b"),
        LanguageTag.JAVA,
    ),
    (
        re.compile(r"\b(using|namespace|public|private|class|static|void|string|int|Console)\b"),
        LanguageTag.CSHARP,
    ),
    (
        re.compile(r"#include\b|\bstd::|\b(iostream|cout|cin|int main|vector|string)\b"),
        LanguageTag.CPP,
    ),
    (
        re.compile(r"<[^>]+>.*</[^>]+>|<!DOCTYPE|<html|<div|<span"),
        LanguageTag.HTML,
    ),
    (
        re.compile(r"\{[^}]*:[^}]*\}|@media\b|[.#][A-Za-z][\w-]*\s*\{"),
        LanguageTag.CSS,
    ),
    (
        re.compile(r"\b(SELECT|FROM|WHERE|INSERT|UPDATE|DELETE|CREATE|DROP|TABLE|DATABASE)\b", flags=re.IGNORECASE),
        LanguageTag.SQL,
    ),
    (
        re.compile(r"\b(echo|ls|cd|mkdir|rm|grep|awk|sed|bash|sh)\b"),
        LanguageTag.BASH,
    ),
    (
        re.compile(r"^\s*[{\[]|\"[^\"]*\":\s*[^,}]+"),
        LanguageTag.JSON,
    ),
    (
        re.compile(r"\$[A-Za-z_]\w*|<\?php"),
        LanguageTag.PHP,
    ),
    (
        re.compile(r"\b(func|var|package|import|fmt\.Println|go)\b"),
        LanguageTag.GO,
    ),
    (
        re.compile(r"\b(fn|let|mut|struct|impl|use|cargo)\b"),
        LanguageTag.RUST,
    ),
    (
        re.compile(r"\b(func|var|let|class|struct|import|swift)\b"),
        LanguageTag.SWIFT,
    ),
    (
        re.compile(r"\b(fun|val|var|class|object|kotlin)\b"),
        LanguageTag.KOTLIN,
    ),
)


def classify_language(code: str) -> LanguageTag:
    text = str(code or "")
    for pattern, tag in LANGUAGE_RULES:
        if pattern.search(text):
            return tag
    return LanguageTag.TEXT


def matching_languages(code: str) -> list[LanguageTag]:
    """Every rule that matches ``code``, highest priority first."""
    text = str(code or "")
    return [tag for pattern, tag in LANGUAGE_RULES if pattern.search(text)]
