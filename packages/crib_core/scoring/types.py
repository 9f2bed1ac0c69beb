# crib_core/scoring/types.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

from crib_core.cards import Card, format_card, format_cards

# none: no flush; hand: 4-card hand flush; hand_and_cut: 5 cards in hand mode;
# crib: 5 cards in crib mode
FlushKind = Literal["none", "hand", "hand_and_cut", "crib"]


@dataclass(frozen=True)
class FifteensScore:
    points: int = 0
    # each combination keeps input order, e.g. (5♠, J♣)
    combinations: tuple[tuple[Card, ...], ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": self.points,
            "combinations": [format_cards(c) for c in self.combinations],
        }


@dataclass(frozen=True)
class PairGroup:
    rank: str
    cards: tuple[Card, ...]
    points: int
    label: str


@dataclass(frozen=True)
class PairsScore:
    points: int = 0
    groups: tuple[PairGroup, ...] = ()

    @property
    def pairs(self) -> list[str]:
        return [g.label for g in self.groups]

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": self.points,
            "pairs": self.pairs,
            "groups": [
                {"rank": g.rank, "cards": format_cards(g.cards), "points": g.points}
                for g in self.groups
            ],
        }


@dataclass(frozen=True)
class Run:
    length: int
    multiplier: int
    cards: tuple[Card, ...]

    @property
    def points(self) -> int:
        return self.length * self.multiplier

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "multiplier": self.multiplier,
            "cards": format_cards(self.cards),
        }


@dataclass(frozen=True)
class RunsScore:
    points: int = 0
    runs: tuple[Run, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"points": self.points, "runs": [r.to_dict() for r in self.runs]}


@dataclass(frozen=True)
class FlushScore:
    points: int = 0
    kind: FlushKind = "none"
    suit: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"points": self.points, "kind": self.kind, "suit": self.suit}


@dataclass(frozen=True)
class NobsScore:
    points: int = 0
    card: Card | None = None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"points": self.points}
        if self.card is not None:
            out["card"] = format_card(self.card)
        return out


@dataclass(frozen=True)
class ScoreReport:
    total: int
    cards: tuple[Card, ...]
    is_crib: bool
    fifteens: FifteensScore
    pairs: PairsScore
    runs: RunsScore
    flush: FlushScore
    nobs: NobsScore

    @property
    def hand(self) -> tuple[Card, ...]:
        return self.cards[:4]

    @property
    def cut(self) -> Card:
        return self.cards[4]

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "mode": "crib" if self.is_crib else "hand",
            "hand": format_cards(self.hand),
            "cut": format_card(self.cut),
            "fifteens": self.fifteens.to_dict(),
            "pairs": self.pairs.to_dict(),
            "runs": self.runs.to_dict(),
            "flush": self.flush.to_dict(),
            "nobs": self.nobs.to_dict(),
        }


__all__ = [
    "FlushKind",
    "FifteensScore",
    "PairGroup",
    "PairsScore",
    "Run",
    "RunsScore",
    "FlushScore",
    "NobsScore",
    "ScoreReport",
]
