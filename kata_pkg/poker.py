"""Poker hand ranking.

See https://en.wikipedia.org/wiki/List_of_poker_hands for the categories.
"""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Union

from .logging_config import get_logger
from .types import Card, PokerRank, ValidationError

logger = get_logger("poker")

HAND_SIZE = 5
ACE = 14
WHEEL = (2, 3, 4, 5, ACE)

RANKS = {str(value): value for value in range(2, 11)}
RANKS.update({"J": 11, "Q": 12, "K": 13, "A": ACE})

SUITS = {"♠": "♠", "♥": "♥", "♦": "♦", "♣": "♣", "S": "♠", "H": "♥", "D": "♦", "C": "♣"}


def parse_card(token: Union[str, Card]) -> Card:
    """Parse a card token such as ``'10♥'``, ``'A♠'`` or ``'qh'``.

    Raises:
        ValidationError: ``INVALID_CARD`` if the token is not a card
    """
    if isinstance(token, Card):
        return token
    if not isinstance(token, str) or len(token.strip()) < 2:
        raise ValidationError(f"Not a card: {token!r}", "INVALID_CARD")
    text = token.strip().upper()
    rank = RANKS.get(text[:-1])
    suit = SUITS.get(text[-1])
    if rank is None or suit is None:
        raise ValidationError(f"Not a card: {token!r}", "INVALID_CARD")
    return Card(rank, suit)


def _is_straight(ranks: list[int]) -> bool:
    ordered = sorted(ranks)
    if tuple(ordered) == WHEEL:
        return True
    return all(b == a + 1 for a, b in zip(ordered, ordered[1:]))


def get_poker_hand_rank(hand: Iterable[Union[str, Card]]) -> PokerRank:
    """Return the category of a five-card poker hand.

    Args:
        hand: Five card tokens or ``Card`` objects

    Returns:
        PokerRank of the hand. The ace counts low only in A-2-3-4-5.

    Raises:
        ValidationError: ``INVALID_HAND`` for a hand that is not five cards,
            ``INVALID_CARD`` for a bad token, ``DUPLICATE_CARD`` if a card
            appears twice

    Example:
        >>> get_poker_hand_rank(["2♥", "4♦", "5♥", "A♦", "3♠"])
        <PokerRank.STRAIGHT: 4>
    """
    cards = [parse_card(token) for token in hand]
    if len(cards) != HAND_SIZE:
        raise ValidationError(
            f"A hand has {HAND_SIZE} cards, got {len(cards)}", "INVALID_HAND"
        )
    if len(set(cards)) != HAND_SIZE:
        raise ValidationError("Hand contains the same card twice", "DUPLICATE_CARD")

    ranks = [card.rank for card in cards]
    flush = len({card.suit for card in cards}) == 1
    straight = len(set(ranks)) == HAND_SIZE and _is_straight(ranks)
    counts = sorted(Counter(ranks).values(), reverse=True)

    if straight and flush:
        rank = PokerRank.STRAIGHT_FLUSH
    elif counts[0] == 4:
        rank = PokerRank.FOUR_OF_KIND
    elif counts[:2] == [3, 2]:
        rank = PokerRank.FULL_HOUSE
    elif flush:
        rank = PokerRank.FLUSH
    elif straight:
        rank = PokerRank.STRAIGHT
    elif counts[0] == 3:
        rank = PokerRank.THREE_OF_KIND
    elif counts[:2] == [2, 2]:
        rank = PokerRank.TWO_PAIRS
    elif counts[0] == 2:
        rank = PokerRank.ONE_PAIR
    else:
        rank = PokerRank.HIGH_CARD
    logger.debug("%s -> %s", " ".join(str(card) for card in cards), rank.name)
    return rank
