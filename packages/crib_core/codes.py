from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CodeDef:
    code: str
    severity: str  # info/warn
    default_msg: str = ""


def mk_rationale(
    c: CodeDef, msg: str | None = None, data: dict[str, Any] | None = None
) -> dict[str, Any]:
    """Build one coded item: a breakdown line or a teaching note.

    Keys: code, msg (defaults to CodeDef.default_msg), severity, and data
    when template fields are supplied.
    """
    item: dict[str, Any] = {
        "code": c.code,
        "msg": (msg or c.default_msg),
        "severity": c.severity,
    }
    if data is not None:
        item["data"] = data
    return item


class SCodes:
    # --- scoring breakdown ---
    SC_FIFTEENS = CodeDef("SC_FIFTEENS", "info", "Fifteens: {points} points")
    SC_PAIRS = CodeDef("SC_PAIRS", "info", "Pairs: {points} points")
    SC_RUNS = CodeDef("SC_RUNS", "info", "Runs: {points} points")
    SC_RUNS_MULTI = CodeDef("SC_RUNS_MULTI", "info", "Runs: {points} points")
    SC_FLUSH_HAND = CodeDef("SC_FLUSH_HAND", "info", "Flush: {points} points (Hand flush)")
    SC_FLUSH_HAND_CUT = CodeDef(
        "SC_FLUSH_HAND_CUT", "info", "Flush: {points} points (Hand + cut same suit)"
    )
    SC_FLUSH_CRIB = CodeDef(
        "SC_FLUSH_CRIB", "info", "Flush: {points} points (All 5 cards same suit)"
    )
    SC_NOBS = CodeDef("SC_NOBS", "info", "Nobs: {points} point")
    SC_TOTAL = CodeDef("SC_TOTAL", "info", "Total: {total} points")

    # --- analysis notes ---
    AN_PERFECT = CodeDef("N201", "info", "Perfect hand: 29 points.")
    AN_NINETEEN = CodeDef("N202", "info", "Nineteen: the hand scores nothing.")
    AN_CRIB_FOUR_FLUSH = CodeDef(
        "N203", "info", "A 4-card flush does not count in the crib."
    )

    # --- warnings ---
    WARN_INCOMPLETE = CodeDef("W_INCOMPLETE", "warn", "Select all 5 cards to see score")


__all__ = [
    "CodeDef",
    "mk_rationale",
    "SCodes",
]
