"""Range compression for ordered integer lists.

    [0, 1, 2, 5, 7, 8, 9]  <->  '0-2,5,7-9'

Only runs of three or more integers use the dash form.
"""

from __future__ import annotations

from typing import Iterable

from .logging_config import get_logger
from .types import ValidationError

logger = get_logger("ranges")


def _runs(nums: list[int]) -> list[list[int]]:
    runs: list[list[int]] = []
    for value in nums:
        if runs and runs[-1][-1] + 1 == value:
            runs[-1].append(value)
        else:
            runs.append([value])
    return runs


def _format_run(run: list[int]) -> str:
    if len(run) > 2:
        return f"{run[0]}-{run[-1]}"
    return ",".join(str(value) for value in run)


def extract_ranges(nums: Iterable[int]) -> str:
    """Return the compressed string form of an ascending integer list.

    Args:
        nums: Strictly ascending integers

    Returns:
        Comma separated tokens, e.g. ``'0-2,5,7-9'``. Empty input gives ``''``.

    Raises:
        ValidationError: ``INVALID_NUMBER`` for non-integers, ``NOT_ASCENDING``
            if the values are not strictly ascending
    """
    values = list(nums)
    for value in values:
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValidationError(f"Not an integer: {value!r}", "INVALID_NUMBER")
    for previous, current in zip(values, values[1:]):
        if current <= previous:
            raise ValidationError(
                f"Values must be strictly ascending ({previous} then {current})",
                "NOT_ASCENDING",
            )
    return ",".join(_format_run(run) for run in _runs(values))


def _parse_int(token: str, source: str) -> int:
    try:
        return int(token)
    except ValueError:
        raise ValidationError(
            f"Malformed range token {source!r}", "INVALID_RANGE"
        ) from None


def _parse_token(token: str) -> list[int]:
    token = token.strip()
    # The separating dash is the first one that follows a digit; earlier
    # dashes are minus signs.
    for i in range(1, len(token)):
        if token[i] == "-" and token[i - 1].isdigit():
            start = _parse_int(token[:i], token)
            end = _parse_int(token[i + 1 :], token)
            if end < start:
                raise ValidationError(
                    f"Range {token!r} ends before it starts", "INVALID_RANGE"
                )
            return list(range(start, end + 1))
    return [_parse_int(token, token)]


def parse_ranges(text: str) -> list[int]:
    """Expand a compressed range string back into integers.

    Args:
        text: String such as ``'-3--1,4,6-8'``

    Returns:
        List of integers in the order written

    Raises:
        ValidationError: ``INVALID_INPUT`` for non-string input,
            ``INVALID_RANGE`` for malformed tokens
    """
    if not isinstance(text, str):
        raise ValidationError(
            f"Expected a string, got {type(text).__name__}", "INVALID_INPUT"
        )
    if not text.strip():
        return []
    values: list[int] = []
    for token in text.split(","):
        values.extend(_parse_token(token))
    logger.debug("Parsed %r into %d integers", text, len(values))
    return values
