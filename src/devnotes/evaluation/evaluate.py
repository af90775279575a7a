# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import replace
from pathlib import Path
from typing import Any

import pandas as pd
from sklearn.metrics import accuracy_score, confusion_matrix, f1_score, precision_score, recall_score

from ..config import DEFAULT_THRESHOLDS, DetectionThresholds
from ..features import enrich_dataframe
from ..inference.language import classify_language

REQUIRED_COLUMNS = ("text", "is_code")
DEFAULT_LENGTH_GRID = tuple(range(20, 121, 10))


def load_samples(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix in {".jsonl", ".ndjson"}:
        df = pd.read_json(path, lines=True)
    elif suffix == ".json":
        df = pd.read_json(path)
    elif suffix == ".csv":
        df = pd.read_csv(path, keep_default_na=False)
    elif suffix == ".parquet":
        df = pd.read_parquet(path)
    else:
        raise ValueError(f"Unsupported dataset format: {path}")
    missing = [column for column in REQUIRED_COLUMNS if column not in df.columns]
    if missing:
        raise ValueError(f"Dataset {path} is missing columns: {', '.join(missing)}")
    return df


def _detection_metrics(y_true: pd.Series, y_pred: pd.Series) -> dict[str, float]:
    tn, fp, fn, tp = confusion_matrix(y_true, y_pred, labels=[0, 1]).ravel()
    return {
        "precision": float(precision_score(y_true, y_pred, zero_division=0)),
        "recall": float(recall_score(y_true, y_pred, zero_division=0)),
        "f1": float(f1_score(y_true, y_pred, zero_division=0)),
        "tn": float(tn),
        "fp": float(fp),
        "fn": float(fn),
        "tp": float(tp),
    }


def _language_accuracy(df: pd.DataFrame) -> tuple[float, int]:
    if "language" not in df.columns:
        return 0.0, 0
    labelled = df[df["language"].fillna("").astype(str).str.strip() != ""]
    if labelled.empty:
        return 0.0, 0
    predicted = labelled["text"].map(lambda text: classify_language(text).value)
    return float(accuracy_score(labelled["language"].astype(str), predicted)), int(len(labelled))


def evaluate_detector(df: pd.DataFrame, thresholds: DetectionThresholds = DEFAULT_THRESHOLDS) -> dict[str, float]:
    enriched = enrich_dataframe(df, thresholds)
    y_true = enriched["is_code"].astype(int)
    metrics = _detection_metrics(y_true, enriched["predicted_code"])
    accuracy, labelled = _language_accuracy(enriched)
    metrics["language_accuracy"] = accuracy
    metrics["language_rows"] = float(labelled)
    metrics["rows"] = float(len(enriched))
    return metrics


def sweep_min_length(
    df: pd.DataFrame,
    *,
    base: DetectionThresholds = DEFAULT_THRESHOLDS,
    grid: tuple[int, ...] = DEFAULT_LENGTH_GRID,
) -> list[dict[str, Any]]:
    y_true = df["is_code"].astype(int)
    rows: list[dict[str, Any]] = []
    for min_length in grid:
        thresholds = replace(base, min_length=min_length)
        enriched = enrich_dataframe(df, thresholds)
        y_pred = enriched["predicted_code"]
        rows.append(
            {
                "min_length": int(min_length),
                "precision": float(precision_score(y_true, y_pred, zero_division=0)),
                "recall": float(recall_score(y_true, y_pred, zero_division=0)),
                "f1": float(f1_score(y_true, y_pred, zero_division=0)),
            }
        )
    return rows


def misclassified(df: pd.DataFrame, thresholds: DetectionThresholds = DEFAULT_THRESHOLDS) -> pd.DataFrame:
    enriched = enrich_dataframe(df, thresholds)
    wrong = enriched[enriched["predicted_code"] != enriched["is_code"].astype(int)]
    return wrong[["text", "is_code", "predicted_code", "evidence"]].reset_index(drop=True)
