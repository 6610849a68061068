"""OCR parsing of scanned bank account numbers.

A scan is three lines of pipes and underscores, three characters per digit::

        _  _     _  _  _  _  _
      | _| _||_||_ |_   ||_||_|     ->  123456789
      ||_  _|  | _||_|  ||_| _|
"""

from __future__ import annotations

from . import config
from .logging_config import get_logger
from .types import ValidationError

logger = get_logger("ocr")

# Index is the digit; each glyph is its three rows concatenated.
GLYPHS = (
    " _ | ||_|",
    "     |  |",
    " _  _||_ ",
    " _  _| _|",
    "   |_|  |",
    " _ |_  _|",
    " _ |_ |_|",
    " _   |  |",
    " _ |_||_|",
    " _ |_| _|",
)
GLYPH_TO_DIGIT = {glyph: digit for digit, glyph in enumerate(GLYPHS)}


def _split_lines(text: str) -> list[str]:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    if len(lines) != config.GLYPH_HEIGHT:
        raise ValidationError(
            f"Expected {config.GLYPH_HEIGHT} lines, got {len(lines)}",
            "MALFORMED_ACCOUNT",
        )
    width = config.GLYPH_WIDTH * config.ACCOUNT_LENGTH
    padded = []
    for number, line in enumerate(lines, start=1):
        line = line.rstrip("\r")
        if len(line) > width:
            raise ValidationError(
                f"Line {number} is {len(line)} characters wide (max {width})",
                "MALFORMED_ACCOUNT",
            )
        padded.append(line.ljust(width))
    return padded


def _glyphs(lines: list[str]) -> list[str]:
    glyphs = []
    for position in range(config.ACCOUNT_LENGTH):
        start = position * config.GLYPH_WIDTH
        glyphs.append(
            "".join(line[start : start + config.GLYPH_WIDTH] for line in lines)
        )
    return glyphs


def parse_bank_account(text: str) -> int:
    """Parse a scanned account number.

    Args:
        text: Three lines of glyphs, an optional trailing newline allowed.
            Lines shorter than the account width are padded with spaces.

    Returns:
        The account number as an integer (leading zeros are not kept)

    Raises:
        ValidationError: ``INVALID_INPUT`` for non-string input,
            ``MALFORMED_ACCOUNT`` for the wrong number or width
            of lines, ``UNKNOWN_GLYPH`` for an unreadable digit
    """
    if not isinstance(text, str):
        raise ValidationError(
            f"Expected a string, got {type(text).__name__}", "INVALID_INPUT"
        )
    result = 0
    for position, glyph in enumerate(_glyphs(_split_lines(text)), start=1):
        digit = GLYPH_TO_DIGIT.get(glyph)
        if digit is None:
            logger.warning("Unreadable glyph %r at digit %d", glyph, position)
            raise ValidationError(
                f"Unrecognised glyph at digit {position}", "UNKNOWN_GLYPH"
            )
        result = result * 10 + digit
    return result
