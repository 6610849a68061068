"""Zig-zag matrix, the JPEG entropy-coding scan order.

    n = 4  ->  [[ 0,  1,  5,  6],
                [ 2,  4,  7, 12],
                [ 3,  8, 11, 13],
                [ 9, 10, 14, 15]]
"""

from __future__ import annotations

import numpy as np

from .logging_config import get_logger
from .types import ValidationError

logger = get_logger("matrix")


def _diagonal_starts(n: int) -> list[int]:
    """First scan index of every anti-diagonal ``d = row + col``."""
    starts = []
    counter = 0
    length = 0
    for d in range(2 * n - 1):
        length += 1 if d < n else -1
        starts.append(counter)
        counter += length
    return starts


def get_zigzag_matrix(n: int, as_array: bool = False):
    """Return the ``n`` x ``n`` zig-zag matrix.

    Cell ``(row, col)`` holds its position along the zig-zag path. Odd
    anti-diagonals run top to bottom, even ones bottom to top, so each
    diagonal picks up where the previous one ended.

    Args:
        n: Matrix dimension, at least 1
        as_array: Return the ``numpy.ndarray`` instead of nested lists

    Returns:
        ``list[list[int]]`` (or ``numpy.ndarray`` when ``as_array``)

    Raises:
        ValidationError: If ``n`` is not a positive integer
    """
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise ValidationError(
            f"Matrix dimension must be a positive integer, got {n!r}",
            "INVALID_DIMENSION",
        )
    n = int(n)
    starts = _diagonal_starts(n)
    matrix = np.zeros((n, n), dtype=np.int64)
    for row in range(n):
        for col in range(n):
            d = row + col
            length = d + 1 if d < n else 2 * n - 1 - d
            offset = row - max(0, d - n + 1)
            if d % 2:
                matrix[row, col] = starts[d] + offset
            else:
                matrix[row, col] = starts[d] + length - 1 - offset
    logger.debug("Built %dx%d zig-zag matrix", n, n)
    if as_array:
        return matrix
    return matrix.tolist()
