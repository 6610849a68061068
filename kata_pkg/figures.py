"""Decomposition of ASCII figures into their rectangles.

A figure is drawn with ``+``, ``-``, ``|`` and spaces::

    '+------------+\\n'
    '|            |\\n'          '+------------+\\n'
    '|            |\\n'          '|            |\\n'      '+------+\\n'     '+-----+\\n'
    '|            |\\n'    ->    '|            |\\n'  ,   '|      |\\n'  ,  '|     |\\n'
    '+------+-----+\\n'          '|            |\\n'      '|      |\\n'     '|     |\\n'
    '|      |     |\\n'          '+------------+\\n'      '+------+\\n'     '+-----+\\n'
    '|      |     |\\n'
    '+------+-----+\\n'
"""

from __future__ import annotations

from typing import Iterator

from .logging_config import get_logger
from .types import ValidationError

logger = get_logger("figures")

CORNER = "+"
HORIZONTAL = "-"
VERTICAL = "|"
FILL = " "
FIGURE_CHARS = frozenset(CORNER + HORIZONTAL + VERTICAL + FILL)


def build_rectangle(width: int, height: int) -> str:
    """Render a standalone rectangle; both sizes include the border."""
    if width < 2 or height < 2:
        raise ValidationError(
            f"Rectangle must be at least 2x2, got {width}x{height}", "MALFORMED_FIGURE"
        )
    inner = width - 2
    border = CORNER + HORIZONTAL * inner + CORNER + "\n"
    row = VERTICAL + FILL * inner + VERTICAL + "\n"
    return border + row * (height - 2) + border


def _split_figure(figure: str) -> list[str]:
    lines = figure.split("\n")
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return []
    for number, line in enumerate(lines, start=1):
        bad = set(line) - FIGURE_CHARS
        if bad:
            raise ValidationError(
                f"Unexpected characters {''.join(sorted(bad))!r} on line {number}",
                "MALFORMED_FIGURE",
            )
    if CORNER not in lines[0] or CORNER not in lines[-1]:
        raise ValidationError(
            "Figure must start and end with a border line", "MALFORMED_FIGURE"
        )
    width = max(len(line) for line in lines)
    return [line.ljust(width) for line in lines]


def _at(lines: list[str], row: int, col: int) -> str:
    if 0 <= row < len(lines) and 0 <= col < len(lines[row]):
        return lines[row][col]
    return FILL


def _malformed(row: int, col: int, reason: str) -> ValidationError:
    return ValidationError(
        f"Rectangle with corner at line {row + 1}, column {col + 1} {reason}",
        "MALFORMED_FIGURE",
    )


def _trace(lines: list[str], top: int, left: int) -> tuple[int, int]:
    """Follow the edges from a top-left corner; return ``(bottom, right)``."""
    right = left + 1
    while True:
        char = _at(lines, top, right)
        if char == CORNER and _at(lines, top + 1, right) in (VERTICAL, CORNER):
            break
        if char not in (HORIZONTAL, CORNER):
            raise _malformed(top, left, "has no right edge")
        right += 1

    bottom = top + 1
    while True:
        char = _at(lines, bottom, left)
        if char == CORNER and _at(lines, bottom, left + 1) in (HORIZONTAL, CORNER):
            break
        if char not in (VERTICAL, CORNER):
            raise _malformed(top, left, "has no bottom edge")
        bottom += 1

    if _at(lines, bottom, right) != CORNER:
        raise _malformed(top, left, "is not closed")
    for col in range(left + 1, right):
        if _at(lines, bottom, col) not in (HORIZONTAL, CORNER):
            raise _malformed(top, left, "has a broken bottom edge")
    for row in range(top + 1, bottom):
        if _at(lines, row, right) not in (VERTICAL, CORNER):
            raise _malformed(top, left, "has a broken right edge")
        if lines[row][left + 1 : right].strip():
            raise _malformed(top, left, "has lines drawn inside it")
    return bottom, right


def _rectangles(lines: list[str]) -> Iterator[str]:
    for top, line in enumerate(lines):
        for left, char in enumerate(line):
            if char != CORNER:
                continue
            if _at(lines, top, left + 1) not in (HORIZONTAL, CORNER):
                continue
            if _at(lines, top + 1, left) not in (VERTICAL, CORNER):
                continue
            bottom, right = _trace(lines, top, left)
            yield build_rectangle(right - left + 1, bottom - top + 1)


def get_figure_rectangles(figure: str) -> Iterator[str]:
    """Break an ASCII figure into the rectangles it is made of.

    Every ``+`` with a border running right and a wall running down is the
    top-left corner of one rectangle. Its right edge is the first corner on
    the top border with a wall below it, its bottom edge the first corner
    down the left wall with a border to its right.

    Args:
        figure: Multi-line figure

    Returns:
        Lazy iterator over rectangle renderings, every row ending in a
        newline. Order is not significant.

    Raises:
        ValidationError: ``INVALID_INPUT`` for non-string input,
            ``MALFORMED_FIGURE`` for stray characters or a figure that does
            not open and close with border lines. A rectangle whose edges do
            not close, or that has lines drawn inside it, raises
            ``MALFORMED_FIGURE`` when the iterator reaches it.
    """
    if not isinstance(figure, str):
        raise ValidationError(
            f"Expected a string, got {type(figure).__name__}", "INVALID_INPUT"
        )
    lines = _split_figure(figure)
    logger.debug("Decomposing %d-line figure", len(lines))
    return _rectangles(lines)
