# packages/crib_core/scoring/service.py
from __future__ import annotations

import logging
from collections.abc import Sequence

from crib_core.cards import Card, format_cards
from crib_core.context import ScoringContext
from crib_core.providers.selector import read_hand

from .fifteens import score_fifteens
from .flush import score_flush
from .nobs import score_nobs
from .pairs import score_pairs
from .runs import score_runs
from .types import ScoreReport
from .utils import present_cards

HAND_SIZE = 5

_LOG = logging.getLogger(__name__)


def _refuse(reason: str, **fields) -> None:
    _LOG.debug("score_hand_refused", extra={"reason": reason, **fields})
    return None


def _has_duplicates(cards: Sequence[Card]) -> bool:
    return len(set(cards)) != len(cards)


def score_hand(
    cards: Sequence[Card | str | None] | None,
    is_crib: bool = False,
    ctx: ScoringContext | None = None,
) -> ScoreReport | None:
    """Score 4 hand cards + cut (index 4); None when the hand is not scorable.

    Not scorable: missing input, length != 5, an absent/unreadable slot, or a
    repeated card while duplicate rejection is on. String slots are read
    through the configured card reader.
    """
    if cards is None:
        return _refuse("missing")
    if len(cards) != HAND_SIZE:
        return _refuse("wrong_length", length=len(cards))

    ctx = ctx or ScoringContext.build()
    slots = read_hand(cards)
    hand = present_cards(slots)
    if hand is None:
        missing = [i for i, c in enumerate(slots) if c is None]
        return _refuse("incomplete", missing_slots=missing)
    if ctx.flags.reject_duplicates and _has_duplicates(hand):
        return _refuse("duplicate_card", cards=format_cards(hand))

    # independent rules over the same immutable hand
    fifteens = score_fifteens(hand)
    pairs = score_pairs(hand)
    runs = score_runs(hand)
    flush = score_flush(hand, is_crib=is_crib)
    nobs = score_nobs(hand)
    total = fifteens.points + pairs.points + runs.points + flush.points + nobs.points

    report = ScoreReport(
        total=total,
        cards=hand,
        is_crib=bool(is_crib),
        fifteens=fifteens,
        pairs=pairs,
        runs=runs,
        flush=flush,
        nobs=nobs,
    )

    level = logging.INFO if ctx.flags.debug_log else logging.DEBUG
    _LOG.log(
        level,
        "score_hand",
        extra={
            "cards": format_cards(hand),
            "mode": "crib" if is_crib else "hand",
            "total": total,
            "fifteens": fifteens.points,
            "pairs": pairs.points,
            "runs": runs.points,
            "flush": flush.points,
            "flush_kind": flush.kind,
            "nobs": nobs.points,
        },
    )
    return report


__all__ = ["HAND_SIZE", "score_hand"]
