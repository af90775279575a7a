# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
"""Lexical signals deciding whether a text span looks like code."""
from __future__ import annotations

import re

import pandas as pd

from .config import DEFAULT_THRESHOLDS, DetectionThresholds
from .schemas import DetectionVerdict

FENCE = "```"

KEYWORD_RE = re.compile(
    r"\b(function|const|let|var|class|interface|type|import|export|async|await"
    r"|if|else|for|while|switch|case|try|catch|finally)\b"
)
PYTHON_DECL_RE = re.compile(r"\bdef\s+\w+|\bfrom\s+[\w.]+\s+import\b|\bif\s+__name__\b")
MARKUP_TAG_RE = re.compile(r"<[^>]+>")
STYLE_BLOCK_RE = re.compile(r"\{[^}]*:[^}]*\}")
SQL_KEYWORD_RE = re.compile(r"\b(SELECT|FROM|WHERE|INSERT|UPDATE|DELETE|CREATE|DROP)\b", flags=re.IGNORECASE)
BRACKET_DENSITY_RE = re.compile(r"[(){}\[\];].*[(){}\[\];]")
JSON_START_RE = re.compile(r"^\s*[{\[]")
FENCE_RE = re.compile(re.escape(FENCE))
CALL_SHAPE_RE = re.compile(r"\w+\([^)]*\)")

# Order is reporting order only; signals are independent.
SIGNALS: tuple[tuple[str, re.Pattern[str]], ...] = (
    ("keyword", KEYWORD_RE),
    ("python_decl", PYTHON_DECL_RE),
    ("markup_tag", MARKUP_TAG_RE),
    ("style_block", STYLE_BLOCK_RE),
    ("sql_keyword", SQL_KEYWORD_RE),
    ("bracket_density", BRACKET_DENSITY_RE),
    ("json_start", JSON_START_RE),
    ("fence", FENCE_RE),
    ("call_shape", CALL_SHAPE_RE),
)

SIGNAL_COLUMNS = [name for name, _pattern in SIGNALS]


def _safe_text(value: object) -> str:
    return str(value or "")


def detection_signals(text: str) -> list[str]:
    text = _safe_text(text)
    return [name for name, pattern in SIGNALS if pattern.search(text)]


def evidence_count(text: str) -> int:
    return len(detection_signals(text))


def _line_count(text: str) -> int:
    return len(text.split("\n"))


def _verdict(text: str, evidence: int, thresholds: DetectionThresholds) -> bool:
    if evidence >= thresholds.min_evidence:
        return True
    if FENCE in text:
        return True
    if evidence < 1:
        return False
    return _line_count(text) > thresholds.min_lines or len(text) > thresholds.min_length


def detect_code(text: str, thresholds: DetectionThresholds = DEFAULT_THRESHOLDS) -> DetectionVerdict:
    """Classify ``text`` as code or prose and report which signals fired.

    A single signal is not enough on short prose; it only counts once the
    text spans more than ``min_lines`` lines or exceeds ``min_length``
    characters.
    """
    text = _safe_text(text)
    signals = detection_signals(text)
    return DetectionVerdict(is_code=_verdict(text, len(signals), thresholds), evidence=len(signals), signals=signals)


def is_likely_code(text: str, thresholds: DetectionThresholds = DEFAULT_THRESHOLDS) -> bool:
    return detect_code(text, thresholds).is_code


def enrich_dataframe(df: pd.DataFrame, thresholds: DetectionThresholds = DEFAULT_THRESHOLDS) -> pd.DataFrame:
    out = df.copy()
    if "text" not in out.columns:
        raise ValueError("DataFrame needs a 'text' column")
    out["text"] = out["text"].fillna("").map(_safe_text)
    for name, pattern in SIGNALS:
        out[name] = out["text"].map(lambda text, pattern=pattern: 1 if pattern.search(text) else 0)
    out["evidence"] = out[SIGNAL_COLUMNS].sum(axis=1).astype(int)
    out["line_count"] = out["text"].map(_line_count)
    out["char_count"] = out["text"].str.len()
    out["predicted_code"] = [
        int(_verdict(text, int(evidence), thresholds)) for text, evidence in zip(out["text"], out["evidence"])
    ]
    return out
