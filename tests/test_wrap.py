"""Unit tests for greedy text wrapping."""

import pytest

from kata_pkg import config
from kata_pkg.types import ValidationError
from kata_pkg.wrap import wrap_text

TEXT = "The String global object is a constructor for strings, or a sequence of characters."


def test_wrap_26_columns():
    assert list(wrap_text(TEXT, 26)) == [
        "The String global object",
        "is a constructor for",
        "strings, or a sequence of",
        "characters.",
    ]


def test_wrap_12_columns():
    assert list(wrap_text(TEXT, 12)) == [
        "The String",
        "global",
        "object is a",
        "constructor",
        "for strings,",
        "or a",
        "sequence of",
        "characters.",
    ]


@pytest.mark.parametrize("columns", [11, 15, 26, 40, 200])
def test_lines_fit_and_rebuild_text(columns):
    lines = list(wrap_text(TEXT, columns))
    assert all(len(line) <= columns for line in lines)
    assert " ".join(lines) == TEXT


def test_whitespace_is_normalised():
    assert list(wrap_text("  one\ttwo\n\nthree  ", 7)) == ["one two", "three"]


def test_empty_text():
    assert list(wrap_text("", 10)) == []
    assert list(wrap_text("   \n ", 10)) == []


def test_exact_fit():
    assert list(wrap_text("abc def", 7)) == ["abc def"]


def test_lazy_prefix():
    lines = wrap_text(TEXT, 12)
    assert next(lines) == "The String"


def test_long_word_error_by_default(monkeypatch):
    monkeypatch.setattr(config, "WRAP_LONG_WORDS", "error")
    with pytest.raises(ValidationError) as exc:
        wrap_text("a supercalifragilistic word", 10)
    assert exc.value.code == "WORD_TOO_LONG"


def test_long_word_break():
    lines = list(wrap_text("a abcdefghij b", 4, long_words="break"))
    assert lines == ["a", "abcd", "efgh", "ij b"]


def test_long_word_policy_from_config(monkeypatch):
    monkeypatch.setattr(config, "WRAP_LONG_WORDS", "break")
    assert list(wrap_text("abcdef", 3)) == ["abc", "def"]


def test_unknown_policy():
    with pytest.raises(ValidationError) as exc:
        wrap_text("abc", 3, long_words="hyphenate")
    assert exc.value.code == "INVALID_POLICY"


@pytest.mark.parametrize("columns", [0, -1, 2.0, None])
def test_invalid_columns(columns):
    with pytest.raises(ValidationError) as exc:
        wrap_text("abc", columns)
    assert exc.value.code == "INVALID_COLUMNS"


@pytest.mark.parametrize("text", [None, 42, ["a", "b"]])
def test_non_string_text(text):
    with pytest.raises(ValidationError) as exc:
        wrap_text(text, 10)
    assert exc.value.code == "INVALID_INPUT"
