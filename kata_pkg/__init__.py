"""Kata package: string, array and grid exercises plus their API and CLI."""

from .braces import expand_braces
from .dominoes import can_dominoes_make_row
from .figures import get_figure_rectangles
from .matrix import get_zigzag_matrix
from .ocr import parse_bank_account
from .poker import get_poker_hand_rank
from .ranges import extract_ranges, parse_ranges
from .types import Card, KataResult, PokerRank, ValidationError
from .wrap import wrap_text

__all__ = [
    "expand_braces",
    "get_zigzag_matrix",
    "can_dominoes_make_row",
    "extract_ranges",
    "parse_ranges",
    "parse_bank_account",
    "wrap_text",
    "get_poker_hand_rank",
    "get_figure_rectangles",
    "Card",
    "KataResult",
    "PokerRank",
    "ValidationError",
]
