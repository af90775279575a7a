# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

FORCED_MARKERS = (
    "#code",
    "#js",
    "#javascript",
    "#ts",
    "#typescript",
    "#python",
    "#py",
    "#java",
    "#cpp",
    "#c++",
    "#csharp",
    "#c#",
    "#html",
    "#css",
    "#scss",
    "#sql",
    "#bash",
    "#shell",
    "#json",
    "#xml",
    "#yaml",
    "#yml",
    "#markdown",
    "#md",
    "#php",
    "#ruby",
    "#go",
    "#rust",
    "#swift",
    "#kotlin",
    "#react",
    "#vue",
    "#angular",
    "#node",
    "#express",
)


def _normalize_line(line: str) -> str:
    return str(line or "").strip().lower()


def find_forced_marker(line: str) -> str | None:
    # Substring match: "#python," and "see below #js" both count.
    normalized = _normalize_line(line)
    for marker in FORCED_MARKERS:
        if marker in normalized:
            return marker
    return None


def has_forced_language_marker(line: str) -> bool:
    return find_forced_marker(line) is not None
