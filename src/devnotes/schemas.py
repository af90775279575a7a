# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class LanguageTag(str, Enum):
    TYPESCRIPT = "typescript"
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    JAVA = "java"
    CSHARP = "csharp"
    CPP = "cpp"
    HTML = "html"
    CSS = "css"
    SQL = "sql"
    BASH = "bash"
    JSON = "json"
    PHP = "php"
    GO = "go"
    RUST = "rust"
    SWIFT = "swift"
    KOTLIN = "kotlin"
    TEXT = "text"

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True, frozen=True)
class DetectionVerdict:
    is_code: bool
    evidence: int
    signals: list[str] = field(default_factory=list)


@dataclass(slots=True, frozen=True)
class CodeBlock:
    language: str
    code: str


@dataclass(slots=True)
class PasteResult:
    handled: bool
    content: str
    cursor: int
    language: LanguageTag | None = None
    forced: bool = False
    block: str | None = None


@dataclass(slots=True)
class Note:
    id: str
    title: str = ""
    content: str = ""
    tags: list[str] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    expires_at: datetime | None = None
    is_permanent: bool = True
    word_count: int = 0
    char_count: int = 0
    has_code: bool = False
