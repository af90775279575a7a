from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from devnotes.evaluation.evaluate import (
    DEFAULT_LENGTH_GRID,
    evaluate_detector,
    load_samples,
    misclassified,
    sweep_min_length,
)

SAMPLES_PATH = Path(__file__).resolve().parents[1] / "data" / "paste_samples.jsonl"


def _frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "text": ["function add(a, b) { return a + b; }", "Call mom", "let x = 1;"],
            "is_code": [1, 0, 1],
            "language": ["javascript", "", "javascript"],
        }
    )


def test_evaluate_detector_metrics():
    metrics = evaluate_detector(_frame())
    assert metrics["precision"] == 1.0
    assert metrics["recall"] == 0.5
    assert metrics["tp"] == 1.0
    assert metrics["fn"] == 1.0
    assert metrics["tn"] == 1.0
    assert metrics["language_accuracy"] == 1.0
    assert metrics["language_rows"] == 2.0
    assert metrics["rows"] == 3.0


def test_misclassified_lists_missed_snippet():
    errors = misclassified(_frame())
    assert errors["text"].tolist() == ["let x = 1;"]


def test_sweep_covers_grid():
    rows = sweep_min_length(_frame())
    assert [row["min_length"] for row in rows] == list(DEFAULT_LENGTH_GRID)
    assert all(0.0 <= row["f1"] <= 1.0 for row in rows)


def test_bundled_samples_load():
    df = load_samples(SAMPLES_PATH)
    assert len(df) == 17
    metrics = evaluate_detector(df)
    assert metrics["rows"] == 17.0
    assert metrics["precision"] == 1.0


def test_missing_columns_rejected(tmp_path):
    path = tmp_path / "bad.csv"
    path.write_text("body\nhello\n", encoding="utf-8")
    with pytest.raises(ValueError):
        load_samples(path)


def test_unsupported_format_rejected(tmp_path):
    with pytest.raises(ValueError):
        load_samples(tmp_path / "samples.txt")
