from __future__ import annotations

import pytest

from devnotes.inference.language import LANGUAGE_RULES, classify_language, matching_languages
from devnotes.schemas import LanguageTag


def test_python_definition():
    assert classify_language("def greet(name):\n    print(name)") == LanguageTag.PYTHON


def test_typescript_wins_over_javascript_and_css():
    code = "interface Point { x: number; y: number }"
    assert classify_language(code) == LanguageTag.TYPESCRIPT
    matches = matching_languages(code)
    assert matches[0] == LanguageTag.TYPESCRIPT
    assert LanguageTag.CSS in matches


def test_javascript_let():
    assert classify_language("let x = 1;") == LanguageTag.JAVASCRIPT
    assert classify_language("let x = 1;") == "javascript"


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("public static void main", LanguageTag.JAVA),
        ("using System;", LanguageTag.CSHARP),
        ("#include <iostream>", LanguageTag.CPP),
        (".btn { }", LanguageTag.CSS),
        ("(a) => a", LanguageTag.JAVASCRIPT),
        ("<!DOCTYPE html>", LanguageTag.HTML),
        ("DROP TABLE users;", LanguageTag.SQL),
        ("echo hello", LanguageTag.BASH),
        ('["alpha", "beta"]', LanguageTag.JSON),
        ("$total = 5", LanguageTag.PHP),
        ("package utils", LanguageTag.GO),
        ("impl Display for Point {}", LanguageTag.RUST),
        ("swift build", LanguageTag.SWIFT),
        ('fun greet() = println("hi")', LanguageTag.KOTLIN),
    ],
)
def test_rule_table_samples(code, expected):
    assert classify_language(code) == expected


@pytest.mark.parametrize("text", ["", "Hello world", None])
def test_fallback_is_plain_text(text):
    assert classify_language(text) == LanguageTag.TEXT


@pytest.mark.parametrize("text", ["", "Hello world", "{{{", "\x00\x01", "SELECT", "def", "<p>hi</p>", "a" * 1000])
def test_always_exactly_one_tag(text):
    result = classify_language(text)
    assert isinstance(result, LanguageTag)
    assert classify_language(text) is result


def test_rule_priority_order():
    assert [tag for _pattern, tag in LANGUAGE_RULES] == [
        LanguageTag.TYPESCRIPT,
        LanguageTag.JAVASCRIPT,
        LanguageTag.PYTHON,
        LanguageTag.JAVA,
        LanguageTag.CSHARP,
        LanguageTag.CPP,
        LanguageTag.HTML,
        LanguageTag.CSS,
        LanguageTag.SQL,
        LanguageTag.BASH,
        LanguageTag.JSON,
        LanguageTag.PHP,
        LanguageTag.GO,
        LanguageTag.RUST,
        LanguageTag.SWIFT,
        LanguageTag.KOTLIN,
    ]


def test_first_match_agrees_with_match_list():
    code = "public class Greeter { static void main() {} }"
    assert classify_language(code) == matching_languages(code)[0]
