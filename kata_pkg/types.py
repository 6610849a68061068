"""Type definitions, result dataclasses and the validation error."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any


class PokerRank(IntEnum):
    """Poker hand categories, ordered from weakest to strongest."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIRS = 2
    THREE_OF_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_KIND = 7
    STRAIGHT_FLUSH = 8


@dataclass(frozen=True)
class Card:
    """A playing card. ``rank`` runs 2..14 with the ace high (14)."""

    rank: int
    suit: str

    def __str__(self) -> str:
        names = {11: "J", 12: "Q", 13: "K", 14: "A"}
        return f"{names.get(self.rank, str(self.rank))}{self.suit}"


@dataclass
class KataResult:
    """Result of running one exercise through the API layer."""

    ok: bool
    kata: str
    value: Any = None
    error: str | None = None
    code: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok, "kata": self.kata}
        if self.value is not None:
            result_dict["value"] = self.value
        if self.error is not None:
            result_dict["error"] = self.error
        if self.code is not None:
            result_dict["code"] = self.code
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return (
                f"KataResult(ok=False, kata={self.kata!r}, "
                f"error={self.error!r}, code={self.code!r})"
            )
        return f"KataResult(ok=True, kata={self.kata!r}, value={self.value!r})"


class ValidationError(ValueError):
    """Raised when input validation fails."""

    def __init__(self, message: str, code: str = "VALIDATION_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
