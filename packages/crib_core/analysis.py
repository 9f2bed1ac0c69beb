# crib_core/analysis.py
from __future__ import annotations

from typing import Any

from .cards import SUIT_NAMES, format_card, format_cards
from .codes import SCodes
from .codes import mk_rationale as R
from .scoring.flush import score_flush
from .scoring.types import ScoreReport

PERFECT_HAND = 29


def _combos_text(combos) -> str:
    return ", ".join("[" + ", ".join(format_cards(c)) + "]" for c in combos)


def report_rationale(report: ScoreReport | None) -> list[dict[str, Any]]:
    """Coded breakdown items for every rule that scored, then the total.

    Rules scoring zero are left out. An incomplete hand yields a single
    warning item.
    """
    if report is None:
        return [R(SCodes.WARN_INCOMPLETE)]

    items: list[dict[str, Any]] = []
    f = report.fifteens
    if f.points > 0:
        items.append(
            R(
                SCodes.SC_FIFTEENS,
                data={
                    "points": f.points,
                    "count": len(f.combinations),
                    "combos": _combos_text(f.combinations),
                },
            )
        )

    p = report.pairs
    if p.points > 0:
        items.append(R(SCodes.SC_PAIRS, data={"points": p.points, "labels": ", ".join(p.pairs)}))

    for run in report.runs.runs:
        code = SCodes.SC_RUNS_MULTI if run.multiplier > 1 else SCodes.SC_RUNS
        items.append(
            R(
                code,
                data={
                    "points": run.points,
                    "length": run.length,
                    "multiplier": run.multiplier,
                    "cards": ", ".join(format_cards(run.cards)),
                },
            )
        )

    fl = report.flush
    if fl.points > 0:
        code = {
            "hand": SCodes.SC_FLUSH_HAND,
            "hand_and_cut": SCodes.SC_FLUSH_HAND_CUT,
            "crib": SCodes.SC_FLUSH_CRIB,
        }[fl.kind]
        items.append(
            R(
                code,
                data={
                    "points": fl.points,
                    "suit": fl.suit,
                    "suit_name": SUIT_NAMES.get(fl.suit or "", ""),
                },
            )
        )

    n = report.nobs
    if n.points > 0:
        items.append(R(SCodes.SC_NOBS, data={"points": n.points, "card": format_card(n.card)}))

    items.append(
        R(
            SCodes.SC_TOTAL,
            data={"total": report.total, "mode": "crib" if report.is_crib else "hand"},
        )
    )
    return items


def annotate_report(report: ScoreReport | None) -> dict[str, Any]:
    """Teaching notes about a finished score (or the lack of one)."""
    if report is None:
        return {
            "info": {"scorable": False},
            "notes": [R(SCodes.WARN_INCOMPLETE)],
        }

    notes = []
    if report.total == PERFECT_HAND:
        notes.append(R(SCodes.AN_PERFECT))
    if report.total == 0:
        notes.append(R(SCodes.AN_NINETEEN))
    if report.is_crib and report.flush.points == 0:
        # same cards in hand mode: would the 4 hand cards have made a flush?
        as_hand = score_flush(report.cards, is_crib=False)
        if as_hand.kind == "hand":
            notes.append(
                R(
                    SCodes.AN_CRIB_FOUR_FLUSH,
                    data={"suit": as_hand.suit, "suit_name": SUIT_NAMES[as_hand.suit]},
                )
            )

    return {
        "info": {
            "scorable": True,
            "total": report.total,
            "mode": "crib" if report.is_crib else "hand",
        },
        "notes": notes,
    }


__all__ = ["report_rationale", "annotate_report", "PERFECT_HAND"]
