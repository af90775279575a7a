# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Any, Protocol

from ..config import data_dir

_UNSAFE_KEY_RE = re.compile(r"[^a-z0-9_-]", flags=re.IGNORECASE)


class KeyValueStore(Protocol):
    def get(self, key: str) -> list[dict[str, Any]] | None: ...

    def set(self, key: str, value: list[dict[str, Any]]) -> None: ...


class MemoryStore:
    def __init__(self) -> None:
        self._items: dict[str, str] = {}

    def get(self, key: str) -> list[dict[str, Any]] | None:
        raw = self._items.get(key)
        if raw is None:
            return None
        return json.loads(raw)

    def set(self, key: str, value: list[dict[str, Any]]) -> None:
        # Stored serialized so callers never share mutable state with the store.
        self._items[key] = json.dumps(value, ensure_ascii=False)


class JsonFileStore:
    """One JSON document per collection key under ``root``."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = Path(root) if root is not None else data_dir()

    def _path(self, key: str) -> Path:
        return self.root / f"{_UNSAFE_KEY_RE.sub('_', key)}.json"

    def get(self, key: str) -> list[dict[str, Any]] | None:
        path = self._path(key)
        if not path.exists():
            return None
        payload = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(payload, list):
            raise ValueError(f"Collection {key!r} is not a list: {path}")
        return payload

    def set(self, key: str, value: list[dict[str, Any]]) -> None:
        path = self._path(key)
        path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = path.with_suffix(".json.tmp")
        tmp_path.write_text(json.dumps(value, ensure_ascii=False, indent=2) + "\n", encoding="utf-8")
        tmp_path.replace(path)
