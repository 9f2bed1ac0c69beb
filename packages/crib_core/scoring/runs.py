from __future__ import annotations

from collections.abc import Sequence

from crib_core.cards import Card, sequence_value

from .types import Run, RunsScore
from .utils import present_cards

MIN_RUN = 3
MAX_RUN = 5


def _group_by_value(cards: Sequence[Card]) -> dict[int, list[Card]]:
    groups: dict[int, list[Card]] = {}
    for c in cards:
        groups.setdefault(sequence_value(c), []).append(c)
    return groups


def _find_window(values: list[int], length: int) -> list[int] | None:
    """Leftmost window of `length` consecutive distinct values, if any."""
    for i in range(len(values) - length + 1):
        # values are sorted and distinct, so first/last span is enough
        if values[i + length - 1] == values[i] + length - 1:
            return values[i : i + length]
    return None


def find_longest_run(cards: Sequence[Card]) -> Run | None:
    """Longest consecutive-rank run; shorter runs never score once a longer one exists.

    Duplicated ranks inside the run multiply it: a double run of three is
    3 x 2, a triple run is 3 x 3, a double-double run is 3 x 4.
    """
    if len(cards) < MIN_RUN:
        return None

    groups = _group_by_value(cards)
    values = sorted(groups)

    top = min(MAX_RUN, len(values))
    for length in range(top, MIN_RUN - 1, -1):
        window = _find_window(values, length)
        if window is None:
            continue
        multiplier = 1
        run_cards: list[Card] = []
        for v in window:
            multiplier *= len(groups[v])
            run_cards.extend(groups[v])
        return Run(length=length, multiplier=multiplier, cards=tuple(run_cards))
    return None


def score_runs(cards: Sequence[Card | None]) -> RunsScore:
    present = present_cards(cards)
    if not present:
        return RunsScore()
    run = find_longest_run(present)
    if run is None:
        return RunsScore()
    return RunsScore(points=run.points, runs=(run,))


__all__ = ["MIN_RUN", "MAX_RUN", "find_longest_run", "score_runs"]
