from __future__ import annotations

from devnotes.formatting import contains_code, extract_code_blocks, format_code_block, wrap_code_block
from devnotes.schemas import CodeBlock, LanguageTag


def test_format_code_block_strips_code():
    assert format_code_block("  let x = 1;  \n", "javascript") == "```javascript\nlet x = 1;\n```"


def test_format_code_block_accepts_language_tag():
    assert format_code_block("x", LanguageTag.PYTHON) == "```python\nx\n```"


def test_format_code_block_classifies_when_language_missing():
    assert format_code_block("def f():\n    pass\n").startswith("```python\n")


def test_wrap_code_block_is_an_alias():
    assert wrap_code_block("DROP TABLE users;") == format_code_block("DROP TABLE users;")


def test_fenced_block_survives_plain_text_storage():
    code = "def greet(name):\n    print(name)"
    note_body = "Intro\n" + format_code_block(code) + "\nOutro"
    assert extract_code_blocks(note_body) == [CodeBlock(language="python", code=code)]


def test_extract_multiple_blocks_and_unlabelled_fences():
    body = "intro\n```\nraw\n```\nmid\n```sql\nDROP TABLE x;\n```"
    assert extract_code_blocks(body) == [
        CodeBlock(language="text", code="raw"),
        CodeBlock(language="sql", code="DROP TABLE x;"),
    ]


def test_contains_code():
    assert contains_code("see ```js\nx\n```") is True
    assert contains_code("plain") is False
    assert contains_code(None) is False  # type: ignore[arg-type]
