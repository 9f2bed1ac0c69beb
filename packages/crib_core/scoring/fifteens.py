from __future__ import annotations

from collections.abc import Sequence

from crib_core.cards import Card, fifteen_value

from .types import FifteensScore
from .utils import present_cards

TARGET = 15
POINTS_PER_FIFTEEN = 2


def score_fifteens(cards: Sequence[Card | None]) -> FifteensScore:
    """Every non-empty subset whose values sum to 15 scores 2.

    Subsets are walked as bitmasks 1..2^n-1, so combinations come out in
    mask order with members in input order.
    """
    present = present_cards(cards)
    if not present:
        return FifteensScore()

    n = len(present)
    values = [fifteen_value(c) for c in present]
    combos: list[tuple[Card, ...]] = []
    for mask in range(1, 1 << n):
        total = 0
        members: list[Card] = []
        for i in range(n):
            if mask & (1 << i):
                total += values[i]
                members.append(present[i])
        if total == TARGET:
            combos.append(tuple(members))

    return FifteensScore(points=POINTS_PER_FIFTEEN * len(combos), combinations=tuple(combos))


__all__ = ["score_fifteens"]
