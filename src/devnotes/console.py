# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

ASCII_BANNER = r"""
 ____             _   _       _
|  _ \  _____   _| \ | | ___ | |_ ___  ___
| | | |/ _ \ \ / /  \| |/ _ \| __/ _ \/ __|
| |_| |  __/\ V /| |\  | (_) | ||  __/\__ \
|____/ \___| \_/ |_| \_|\___/ \__\___||___/
"""


@dataclass
class NotesConsole:
    enabled: bool = True

    def __post_init__(self) -> None:
        self._console = Console(color_system="auto", soft_wrap=True) if self.enabled else None

    def banner(self) -> None:
        if self._console:
            self._console.print(Panel.fit(ASCII_BANNER.strip("\n"), title="DevNotes", border_style="cyan"))
            return
        print(ASCII_BANNER)

    def _line(self, level: str, style: str, text: str) -> None:
        if self._console:
            self._console.print(f"[bold {style}]{level}[/bold {style}] {text}")
        else:
            print(f"[{level}] {text}")

    def info(self, text: str) -> None:
        self._line("INFO", "cyan", text)

    def warn(self, text: str) -> None:
        self._line("WARN", "yellow", text)

    def success(self, text: str) -> None:
        self._line("OK", "green", text)

    def metrics_table(self, metrics: dict[str, float], *, title: str) -> None:
        # Confusion counts and row totals print as integers, ratios as fractions.
        rendered = {key: _metric(key, value) for key, value in sorted(metrics.items())}
        if self._console:
            table = Table(title=title, show_lines=True)
            table.add_column("Metric", style="bold")
            table.add_column("Value", justify="right")
            for key, value in rendered.items():
                table.add_row(key, value)
            self._console.print(table)
            return

        print(title)
        for key, value in rendered.items():
            print(f"- {key}: {value}")

    def misclassified_table(self, records: list[dict[str, Any]], *, width: int = 60) -> None:
        if not records:
            self.success("no misclassified samples")
            return
        rows = [
            {
                "expected": "code" if int(record.get("is_code") or 0) else "prose",
                "predicted": "code" if int(record.get("predicted_code") or 0) else "prose",
                "evidence": int(record.get("evidence") or 0),
                "text": _preview(record.get("text"), width),
            }
            for record in records
        ]
        self.rows_table(rows, title=f"Misclassified ({len(rows)})")

    def rows_table(self, rows: list[dict[str, Any]], *, title: str) -> None:
        if not rows:
            self.warn(f"{title}: no rows")
            return
        columns = list(rows[0].keys())
        if self._console:
            table = Table(title=title)
            for column in columns:
                table.add_column(column, justify="right")
            for row in rows:
                table.add_row(*(_cell(row.get(column)) for column in columns))
            self._console.print(table)
            return

        print(title)
        for row in rows:
            print(" ".join(f"{column}={_cell(row.get(column))}" for column in columns))


def _cell(value: object) -> str:
    if isinstance(value, float):
        return f"{value:.3f}"
    return str(value)


COUNT_METRICS = {"tn", "fp", "fn", "tp", "rows", "language_rows"}


def _metric(key: str, value: float) -> str:
    if key in COUNT_METRICS:
        return str(int(value))
    return f"{float(value):.4f}"


def _preview(text: object, width: int) -> str:
    flat = " ".join(str(text or "").split())
    if len(flat) <= width:
        return flat
    return f"{flat[: width - 3]}..."
