"""Utility command-line tools for scoring cribbage hands offline."""

__all__ = [
    "score_hand",
]
