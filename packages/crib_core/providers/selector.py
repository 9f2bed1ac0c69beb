"""
Pick the card reader.

- Default is the native glyph reader
- CRIB_CARD_READER=pokerkit switches to the PokerKit reader; an unknown env
  value falls back to native, while an unknown explicit name raises ValueError
- read_hand() never raises: unreadable tokens become None slots
"""

import logging
from collections.abc import Sequence
from functools import lru_cache

from crib_core.cards import Card
from crib_core.context import CARD_READERS, ScoringContext

from .interfaces import CardReader, CardReadError
from .native_reader import NativeCardReader

_LOG = logging.getLogger(__name__)

READERS = CARD_READERS


def _new_pokerkit() -> CardReader:
    from .pokerkit_adapter import PokerKitCardReader

    return PokerKitCardReader()


@lru_cache(maxsize=4)
def get_reader(name: str | None = None) -> CardReader:
    want = (name or ScoringContext.build().card_reader).strip().lower()
    if want == "pokerkit":
        # explicit choice: a missing pokerkit install surfaces as ImportError
        return _new_pokerkit()
    if want == "native":
        return NativeCardReader()
    raise ValueError(f"Unknown card reader: {want!r} (expected one of {READERS})")


def read_hand(
    tokens: Sequence[str | Card | None], reader: CardReader | None = None
) -> list[Card | None]:
    """Read each slot; Cards pass through, unreadable tokens become None."""
    rd = reader
    out: list[Card | None] = []
    for idx, tok in enumerate(tokens):
        if tok is None or isinstance(tok, Card):
            out.append(tok)
            continue
        if rd is None:
            rd = get_reader()
        try:
            out.append(rd.read(tok))
        except CardReadError as e:
            _LOG.debug(
                "card_read_failed",
                extra={"slot": idx, "reader": rd.name, "error_type": e.error_type},
            )
            out.append(None)
    return out
