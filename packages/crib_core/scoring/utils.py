from __future__ import annotations

from collections.abc import Sequence

from crib_core.cards import Card

HAND_CARDS = 4
CUT_INDEX = 4


def present_cards(cards: Sequence[Card | None] | None) -> tuple[Card, ...] | None:
    """Return the cards as a tuple, or None when the input or any slot is absent."""
    if cards is None:
        return None
    out = tuple(cards)
    if any(c is None for c in out):
        return None
    return out


def split_hand(cards: Sequence[Card]) -> tuple[tuple[Card, ...], Card | None]:
    """Hand cards (indices 0-3) and the cut card (index 4, if any)."""
    hand = tuple(cards[:HAND_CARDS])
    cut = cards[CUT_INDEX] if len(cards) > CUT_INDEX else None
    return hand, cut


__all__ = ["HAND_CARDS", "CUT_INDEX", "present_cards", "split_hand"]
