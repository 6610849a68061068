"""Public API for Kata - returns structured objects instead of raising."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any, Callable

import numpy as np

from .braces import expand_braces
from .dominoes import can_dominoes_make_row
from .figures import get_figure_rectangles
from .logging_config import get_logger
from .matrix import get_zigzag_matrix
from .ocr import parse_bank_account
from .poker import get_poker_hand_rank
from .ranges import extract_ranges, parse_ranges
from .types import KataResult, PokerRank, ValidationError
from .wrap import wrap_text

logger = get_logger("api")

KATAS: dict[str, Callable[..., Any]] = {
    "braces": expand_braces,
    "zigzag": get_zigzag_matrix,
    "dominoes": can_dominoes_make_row,
    "ranges": extract_ranges,
    "parse-ranges": parse_ranges,
    "ocr": parse_bank_account,
    "wrap": wrap_text,
    "poker": get_poker_hand_rank,
    "rectangles": get_figure_rectangles,
}


def _materialise(value: Any) -> Any:
    if isinstance(value, PokerRank):
        return value.name
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, Iterator):
        return list(value)
    return value


def run_kata(name: str, *args: Any, **kwargs: Any) -> KataResult:
    """Run one exercise by name.

    Args:
        name: Key of :data:`KATAS` (e.g. ``"braces"``, ``"poker"``)
        *args: Positional arguments for the exercise
        **kwargs: Keyword arguments for the exercise

    Returns:
        KataResult. Lazy results are collected into lists and poker ranks
        are reported by name, so the value is JSON serialisable.

    Example:
        >>> run_kata("ranges", [0, 1, 2, 5]).value
        '0-2,5'
        >>> run_kata("poker", ["2♥"]).code
        'INVALID_HAND'
    """
    func = KATAS.get(name)
    if func is None:
        return KataResult(
            ok=False, kata=name, error=f"Unknown kata: {name}", code="UNKNOWN_KATA"
        )
    try:
        value = _materialise(func(*args, **kwargs))
    except ValidationError as e:
        logger.info("%s rejected input: %s (%s)", name, e.message, e.code)
        return KataResult(ok=False, kata=name, error=e.message, code=e.code)
    return KataResult(ok=True, kata=name, value=value)
