"""Playing cards, the standard 52-card deck and blackjack hand scoring."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Iterable, MutableSequence

SUITS = ("♥", "♦", "♣", "♠")

RANKS = (
    ("2", 2),
    ("3", 3),
    ("4", 4),
    ("5", 5),
    ("6", 6),
    ("7", 7),
    ("8", 8),
    ("9", 9),
    ("10", 10),
    ("J", 10),
    ("Q", 10),
    ("K", 10),
    ("A", 11),
)


@dataclass(frozen=True)
class Card:
    """A card with its printed rank, its suit symbol and its point value."""

    rank: str
    suit: str
    value: int

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


def standard_deck() -> list[Card]:
    """Return a fresh, ordered deck: hearts, diamonds, clubs, spades, 2 to ace."""
    return [Card(rank, suit, value) for suit in SUITS for rank, value in RANKS]


def shuffle(
    deck: MutableSequence[Card], rng: random.Random | None = None
) -> MutableSequence[Card]:
    """Shuffle the deck in place with a Fisher-Yates pass and return it."""
    rng = rng if rng is not None else random.Random()
    for i in range(len(deck) - 1, 0, -1):
        j = rng.randrange(i + 1)
        deck[i], deck[j] = deck[j], deck[i]
    return deck


def hand_points(hand: Iterable[Card]) -> int:
    """Total point value of the cards in a hand."""
    return sum(card.value for card in hand)