from __future__ import annotations

from collections.abc import Sequence

from crib_core.cards import Card

from .types import NobsScore
from .utils import present_cards, split_hand


def score_nobs(cards: Sequence[Card | None]) -> NobsScore:
    """One for his nob: a Jack in hand of the cut card's suit."""
    present = present_cards(cards)
    if not present:
        return NobsScore()
    hand, cut = split_hand(present)
    if cut is None:
        return NobsScore()
    for c in hand:
        if c.is_jack and c.suit == cut.suit:
            return NobsScore(points=1, card=c)
    return NobsScore()


__all__ = ["score_nobs"]
