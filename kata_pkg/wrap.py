"""Greedy word wrapping at a fixed column width."""

from __future__ import annotations

from typing import Iterator

from . import config
from .logging_config import get_logger
from .types import ValidationError

logger = get_logger("wrap")


def _break_word(word: str, columns: int) -> list[str]:
    return [word[i : i + columns] for i in range(0, len(word), columns)]


def _wrap(words: list[str], columns: int) -> Iterator[str]:
    line = ""
    for word in words:
        if not line:
            line = word
        elif len(line) + 1 + len(word) <= columns:
            line = f"{line} {word}"
        else:
            yield line
            line = word
    if line:
        yield line


def wrap_text(text: str, columns: int, long_words: str | None = None) -> Iterator[str]:
    """Break ``text`` into lines no longer than ``columns``.

    Lines break at whitespace only and words are joined by a single space.

    Args:
        text: Text to wrap
        columns: Maximum line length, at least 1
        long_words: What to do with a word longer than ``columns``:
            ``"error"`` or ``"break"``. Defaults to ``config.WRAP_LONG_WORDS``.

    Returns:
        Lazy iterator over the lines

    Raises:
        ValidationError: ``INVALID_INPUT``, ``INVALID_COLUMNS``, ``TOO_LONG``, ``INVALID_POLICY``,
            or ``WORD_TOO_LONG`` under the ``"error"`` policy

    Example:
        >>> list(wrap_text("The String global object is a constructor", 12))
        ['The String', 'global', 'object is a', 'constructor']
    """
    if not isinstance(text, str):
        raise ValidationError(
            f"Expected a string, got {type(text).__name__}", "INVALID_INPUT"
        )
    if isinstance(columns, bool) or not isinstance(columns, int) or columns < 1:
        raise ValidationError(
            f"Column width must be a positive integer, got {columns!r}",
            "INVALID_COLUMNS",
        )
    if len(text) > config.MAX_INPUT_LENGTH:
        raise ValidationError(
            f"Input too long (max {config.MAX_INPUT_LENGTH} characters)", "TOO_LONG"
        )
    policy = (long_words or config.WRAP_LONG_WORDS).lower()
    if policy not in config.WRAP_LONG_WORD_POLICIES:
        raise ValidationError(
            f"Unknown long-word policy {policy!r}", "INVALID_POLICY"
        )

    words = []
    for word in text.split():
        if len(word) <= columns:
            words.append(word)
        elif policy == "break":
            logger.debug("Breaking %d-character word at %d columns", len(word), columns)
            words.extend(_break_word(word, columns))
        else:
            raise ValidationError(
                f"Word {word!r} is longer than {columns} columns", "WORD_TOO_LONG"
            )
    return _wrap(words, columns)
