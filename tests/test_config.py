from __future__ import annotations

from devnotes.config import DEFAULT_THRESHOLDS, load_thresholds, rich_enabled
from devnotes.env import get_bool_env, get_int_env


def test_defaults_without_environment(monkeypatch):
    for name in ("DEVNOTES_MIN_EVIDENCE", "DEVNOTES_MIN_LINES", "DEVNOTES_MIN_LENGTH"):
        monkeypatch.delenv(name, raising=False)
    assert load_thresholds() == DEFAULT_THRESHOLDS


def test_thresholds_from_environment(monkeypatch):
    monkeypatch.setenv("DEVNOTES_MIN_LENGTH", "80")
    monkeypatch.setenv("DEVNOTES_MIN_EVIDENCE", "0")
    thresholds = load_thresholds()
    assert thresholds.min_length == 80
    assert thresholds.min_evidence == 1


def test_invalid_int_falls_back(monkeypatch):
    monkeypatch.setenv("DEVNOTES_TEST_INT", "abc")
    assert get_int_env("DEVNOTES_TEST_INT", 7) == 7


def test_bool_env(monkeypatch):
    monkeypatch.setenv("DEVNOTES_RICH", "off")
    assert rich_enabled() is False
    monkeypatch.setenv("DEVNOTES_TEST_BOOL", "maybe")
    assert get_bool_env("DEVNOTES_TEST_BOOL", True) is True
