# -*- coding: utf-8 -*-
# SPDX-License-Identifier: MPL-2.0
# Copyright (c) 2026 muffydu37
from __future__ import annotations

import logging
import uuid
from dataclasses import asdict, replace
from datetime import datetime, timedelta, timezone
from typing import Any

from ..formatting import contains_code
from ..schemas import Note
from .backends import KeyValueStore

logger = logging.getLogger(__name__)

NOTES_KEY = "notes"

EXPIRY_DURATIONS: dict[str, timedelta | None] = {
    "permanent": None,
    "1h": timedelta(hours=1),
    "2h": timedelta(hours=2),
    "5h": timedelta(hours=5),
    "1d": timedelta(days=1),
    "3d": timedelta(days=3),
    "7d": timedelta(days=7),
    "14d": timedelta(days=14),
    "30d": timedelta(days=30),
}

_DATE_FIELDS = ("created_at", "updated_at", "expires_at")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _parse_datetime(value: object) -> datetime | None:
    text = str(value or "").strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = f"{text[:-1]}+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def note_to_record(note: Note) -> dict[str, Any]:
    record = asdict(note)
    for name in _DATE_FIELDS:
        value = record.get(name)
        record[name] = value.isoformat() if isinstance(value, datetime) else None
    return record


def note_from_record(record: dict[str, Any]) -> Note:
    if not isinstance(record, dict):
        raise ValueError(f"Note record must be an object, got {type(record).__name__}")
    return Note(
        id=str(record.get("id") or uuid.uuid4()),
        title=str(record.get("title") or ""),
        content=str(record.get("content") or ""),
        tags=[str(tag) for tag in record.get("tags") or []],
        created_at=_parse_datetime(record.get("created_at")),
        updated_at=_parse_datetime(record.get("updated_at")),
        expires_at=_parse_datetime(record.get("expires_at")),
        is_permanent=bool(record.get("is_permanent", True)),
        word_count=int(record.get("word_count") or 0),
        char_count=int(record.get("char_count") or 0),
        has_code=bool(record.get("has_code", False)),
    )


def _is_live(note: Note, now: datetime) -> bool:
    return note.expires_at is None or note.expires_at > now


class NoteStore:
    """In-memory note list that writes through to a key-value backend."""

    def __init__(self, backend: KeyValueStore, *, key: str = NOTES_KEY) -> None:
        self.backend = backend
        self.key = key
        self.notes: list[Note] = []

    def load(self, *, now: datetime | None = None) -> list[Note]:
        try:
            records = self.backend.get(self.key) or []
            stored = [note_from_record(record) for record in records]
        except (OSError, ValueError, TypeError):
            logger.exception("Could not load notes from %r", self.key)
            self.notes = []
            return []

        moment = now or _utc_now()
        self.notes = [note for note in stored if _is_live(note, moment)]
        if len(self.notes) != len(stored):
            logger.info("Dropped %d expired note(s)", len(stored) - len(self.notes))
            self._save()
        return list(self.notes)

    def _save(self) -> None:
        try:
            self.backend.set(self.key, [note_to_record(note) for note in self.notes])
        except (OSError, ValueError, TypeError):
            logger.exception("Could not save notes to %r", self.key)

    def get(self, note_id: str) -> Note | None:
        for note in self.notes:
            if note.id == note_id:
                return note
        return None

    def create(self) -> Note:
        now = _utc_now()
        note = Note(id=str(uuid.uuid4()), created_at=now, updated_at=now)
        self.notes.insert(0, note)
        self._save()
        return note

    def update(self, note: Note) -> Note | None:
        content = note.content or ""
        updated = replace(
            note,
            tags=list(note.tags),
            updated_at=_utc_now(),
            word_count=len(content.split()),
            char_count=len(content),
            has_code=contains_code(content),
        )
        for index, current in enumerate(self.notes):
            if current.id == note.id:
                self.notes[index] = updated
                self._save()
                return updated
        logger.warning("Ignoring update for unknown note %s", note.id)
        return None

    def delete(self, note_id: str) -> bool:
        remaining = [note for note in self.notes if note.id != note_id]
        if len(remaining) == len(self.notes):
            return False
        self.notes = remaining
        self._save()
        return True

    def set_expiry(self, note_id: str, duration: str, *, now: datetime | None = None) -> Note | None:
        if duration not in EXPIRY_DURATIONS:
            raise ValueError(f"Unknown expiry duration: {duration!r}")
        note = self.get(note_id)
        if note is None:
            return None
        delta = EXPIRY_DURATIONS[duration]
        note.expires_at = None if delta is None else (now or _utc_now()) + delta
        note.is_permanent = delta is None
        self._save()
        return note

    def purge_expired(self, *, now: datetime | None = None) -> int:
        moment = now or _utc_now()
        live = [note for note in self.notes if _is_live(note, moment)]
        removed = len(self.notes) - len(live)
        if removed:
            self.notes = live
            self._save()
        return removed

    def search(self, query: str = "", tag: str | None = None) -> list[Note]:
        needle = (query or "").lower()
        results: list[Note] = []
        for note in self.notes:
            if needle and needle not in note.title.lower() and needle not in note.content.lower():
                continue
            if tag and tag not in note.tags:
                continue
            results.append(note)
        return results

    def all_tags(self) -> list[str]:
        return list(dict.fromkeys(tag for note in self.notes for tag in note.tags))
