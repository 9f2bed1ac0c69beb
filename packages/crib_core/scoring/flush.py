from __future__ import annotations

from collections.abc import Sequence

from crib_core.cards import Card

from .types import FlushScore
from .utils import HAND_CARDS, present_cards, split_hand

HAND_FLUSH = 4
FULL_FLUSH = 5


def score_flush(cards: Sequence[Card | None], is_crib: bool = False) -> FlushScore:
    """Flush on the 4 hand cards, with the cut card deciding 4 vs 5.

    - hand mode: 4 hand cards of one suit score 4; a matching cut makes it 5
    - crib mode: only all 5 of one suit counts (5); a 4-card flush is worth 0
    """
    present = present_cards(cards)
    if not present or len(present) < HAND_CARDS:
        return FlushScore()

    hand, cut = split_hand(present)
    suit = hand[0].suit
    if any(c.suit != suit for c in hand):
        return FlushScore()

    cut_matches = cut is not None and cut.suit == suit
    if is_crib:
        if cut_matches:
            return FlushScore(points=FULL_FLUSH, kind="crib", suit=suit)
        return FlushScore()
    if cut_matches:
        return FlushScore(points=FULL_FLUSH, kind="hand_and_cut", suit=suit)
    return FlushScore(points=HAND_FLUSH, kind="hand", suit=suit)


__all__ = ["score_flush"]
