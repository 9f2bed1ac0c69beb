from __future__ import annotations

from collections.abc import Sequence
from math import comb

from crib_core.cards import Card

from .types import PairGroup, PairsScore
from .utils import present_cards

POINTS_PER_PAIR = 2


def pair_label(rank: str, count: int) -> str:
    if count == 2:
        return f"Pair of {rank}s"
    if count == 3:
        return f"Three {rank}s"
    if count == 4:
        return f"Four {rank}s"
    return f"{count} {rank}s"


def score_pairs(cards: Sequence[Card | None]) -> PairsScore:
    """Each unordered same-rank pair scores 2: k copies -> 2 * C(k, 2)."""
    present = present_cards(cards)
    if not present:
        return PairsScore()

    # dict keeps first-appearance order of ranks
    by_rank: dict[str, list[Card]] = {}
    for c in present:
        by_rank.setdefault(c.rank, []).append(c)

    groups: list[PairGroup] = []
    for rank, members in by_rank.items():
        k = len(members)
        if k < 2:
            continue
        groups.append(
            PairGroup(
                rank=rank,
                cards=tuple(members),
                points=POINTS_PER_PAIR * comb(k, 2),
                label=pair_label(rank, k),
            )
        )

    return PairsScore(points=sum(g.points for g in groups), groups=tuple(groups))


__all__ = ["pair_label", "score_pairs"]
