"""Domino row feasibility.

Tiles are edges of a multigraph whose vertices are pip values; a row that
uses every tile is an Eulerian path through that graph.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Sequence

from .logging_config import get_logger
from .types import ValidationError

logger = get_logger("dominoes")


def _as_tile(domino: Sequence[int]) -> tuple[int, int]:
    try:
        left, right = domino
    except (TypeError, ValueError):
        raise ValidationError(
            f"Domino must be a pair of pip values, got {domino!r}", "INVALID_TILE"
        ) from None
    for side in (left, right):
        if isinstance(side, bool) or not isinstance(side, int):
            raise ValidationError(
                f"Pip values must be integers, got {domino!r}", "INVALID_TILE"
            )
    return left, right


def _is_connected(tiles: list[tuple[int, int]]) -> bool:
    parent: dict[int, int] = {}

    def find(value: int) -> int:
        parent.setdefault(value, value)
        while parent[value] != value:
            parent[value] = parent[parent[value]]
            value = parent[value]
        return value

    for left, right in tiles:
        parent[find(left)] = find(right)
    return len({find(value) for value in parent}) <= 1


def can_dominoes_make_row(dominoes: Iterable[Sequence[int]]) -> bool:
    """Return True if all ``dominoes`` can be laid out in a single row.

    Any tile ``[i, j]`` may be turned around to ``[j, i]``. A double adds two
    to its pip's degree, every other tile one to each side. A row exists when
    no more than two pip values have odd degree and the tiles are connected.

    Args:
        dominoes: Iterable of ``(x, y)`` pairs

    Returns:
        True if a row exists (also for no tiles at all)

    Example:
        >>> can_dominoes_make_row([[0, 1], [1, 1]])
        True
        >>> can_dominoes_make_row([[1, 1], [2, 2], [1, 5], [5, 6], [6, 3]])
        False
    """
    tiles = [_as_tile(domino) for domino in dominoes]
    degrees: Counter[int] = Counter()
    for left, right in tiles:
        degrees[left] += 1
        degrees[right] += 1
    odd = sum(1 for degree in degrees.values() if degree % 2)
    result = odd <= 2 and _is_connected(tiles)
    logger.debug(
        "%d tiles, %d odd pip values, row possible: %s", len(tiles), odd, result
    )
    return result
