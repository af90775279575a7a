# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .env import get_bool_env, get_env, get_int_env


@dataclass(slots=True, frozen=True)
class DetectionThresholds:
    """Cut-offs used by the code detector.

    Values are empirical; the defaults are the baseline the bundled
    regression samples were labelled against.
    """

    min_evidence: int = 2
    min_lines: int = 3
    min_length: int = 50


DEFAULT_THRESHOLDS = DetectionThresholds()


def load_thresholds() -> DetectionThresholds:
    return DetectionThresholds(
        min_evidence=max(get_int_env("DEVNOTES_MIN_EVIDENCE", DEFAULT_THRESHOLDS.min_evidence), 1),
        min_lines=max(get_int_env("DEVNOTES_MIN_LINES", DEFAULT_THRESHOLDS.min_lines), 0),
        min_length=max(get_int_env("DEVNOTES_MIN_LENGTH", DEFAULT_THRESHOLDS.min_length), 0),
    )


def data_dir() -> Path:
    return Path(get_env("DEVNOTES_DATA_DIR", "~/.devnotes") or "~/.devnotes").expanduser()


def rich_enabled() -> bool:
    return get_bool_env("DEVNOTES_RICH", True)
