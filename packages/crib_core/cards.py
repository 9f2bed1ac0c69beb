from __future__ import annotations

from dataclasses import dataclass

RANKS = ["A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K"]
SUITS = ["♠", "♥", "♦", "♣"]  # spades, hearts, diamonds, clubs

# A..K -> 1..13, no wraparound
RANK_ORDER: dict[str, int] = {rank: i + 1 for i, rank in enumerate(RANKS)}
SUIT_NAMES = {"♠": "spades", "♥": "hearts", "♦": "diamonds", "♣": "clubs"}

FACE_RANKS = frozenset({"J", "Q", "K"})


@dataclass(frozen=True)
class Card:
    """A playing card. Equality is rank + suit; there is no ordering."""

    rank: str
    suit: str

    def __post_init__(self):
        if self.rank not in RANK_ORDER:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUIT_NAMES:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def fifteen_value(self) -> int:
        return fifteen_value(self)

    @property
    def sequence_value(self) -> int:
        return sequence_value(self)

    @property
    def is_jack(self) -> bool:
        return self.rank == "J"

    def __str__(self) -> str:
        return format_card(self)


def fifteen_value(card: Card) -> int:
    """A=1, 2..10 face value, J/Q/K=10."""
    if card.rank in FACE_RANKS:
        return 10
    return RANK_ORDER[card.rank]


def sequence_value(card: Card) -> int:
    """A=1 .. K=13; used for runs."""
    return RANK_ORDER[card.rank]


def make_deck() -> list[Card]:
    return [Card(rank, suit) for rank in RANKS for suit in SUITS]


def parse_card(token: str | None) -> Card | None:
    """Parse 'A♠' / '10♥' into a Card; anything else yields None."""
    if not isinstance(token, str) or len(token) not in (2, 3):
        return None
    rank, suit = token[:-1], token[-1]
    if rank not in RANK_ORDER or suit not in SUIT_NAMES:
        return None
    return Card(rank, suit)


def format_card(card: Card | None) -> str:
    if card is None:
        return ""
    return f"{card.rank}{card.suit}"


def format_cards(cards) -> list[str]:
    return [format_card(c) for c in cards]


__all__ = [
    "Card",
    "RANKS",
    "SUITS",
    "RANK_ORDER",
    "SUIT_NAMES",
    "fifteen_value",
    "sequence_value",
    "make_deck",
    "parse_card",
    "format_card",
    "format_cards",
]
