#!/usr/bin/env python3
from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from devnotes.config import load_thresholds, rich_enabled
from devnotes.console import NotesConsole
from devnotes.evaluation.evaluate import evaluate_detector, load_samples, misclassified, sweep_min_length


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Measure code detection precision/recall/F1 across length thresholds.")
    parser.add_argument("--eval", default="data/paste_samples.jsonl", help="Labelled dataset (jsonl, json, csv or parquet)")
    parser.add_argument("--output", default="reports/threshold_eval.json", help="JSON report output path")
    parser.add_argument("--show-errors", action="store_true", help="List misclassified samples")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    console = NotesConsole(enabled=rich_enabled())
    eval_path = Path(args.eval)
    output_path = Path(args.output)

    thresholds = load_thresholds()
    df = load_samples(eval_path)
    console.info(f"dataset={eval_path} rows={len(df)} thresholds={asdict(thresholds)}")

    metrics = evaluate_detector(df, thresholds)
    rows = sweep_min_length(df, base=thresholds)
    console.metrics_table(metrics, title="Detector")
    console.rows_table(rows, title="min_length sweep")

    if args.show_errors:
        errors = misclassified(df, thresholds)
        console.misclassified_table(errors.to_dict(orient="records"))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    report = {"thresholds": asdict(thresholds), "metrics": metrics, "sweep": rows}
    output_path.write_text(json.dumps(report, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
    console.success(f"report: {output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
