"""
PokerKit adapter

Reads glyph tokens ('5♠') like the native reader, and ASCII tokens ('5s', 'Th',
'10d') through PokerKit's card parser, converted into our Card model.
"""

import functools

from crib_core.cards import Card, parse_card

from .interfaces import CardReader, CardReadError

# PokerKit uses 'T' for ten and lowercase ASCII suit letters
_RANK_MAP = {"T": "10"}
_SUIT_MAP = {"s": "♠", "h": "♥", "d": "♦", "c": "♣"}


def _canon_token(token: str) -> str:
    t = token.strip()
    if len(t) == 3 and t[:2] == "10":
        return "T" + t[-1].lower()
    if len(t) != 2:
        raise CardReadError("invalid_token", detail={"token": token})
    return t[0].upper() + t[1].lower()


def card_from_pokerkit(pk_card) -> Card:
    """Convert a pokerkit.Card into a Card; unknown rank/suit is an error."""
    rank = str(pk_card.rank.value)
    suit = str(pk_card.suit.value)
    try:
        return Card(_RANK_MAP.get(rank, rank), _SUIT_MAP[suit])
    except (KeyError, ValueError) as e:
        raise CardReadError("unknown_card", detail={"rank": rank, "suit": suit}, original=str(e))


class PokerKitCardReader(CardReader):
    name = "pokerkit"

    def __init__(self):
        # deferred import keeps pokerkit out of the glyph-only path
        from pokerkit import Card as PKCard

        self._PKCard = PKCard

    @functools.lru_cache(maxsize=256)
    def _read_cached(self, canon: str) -> Card:
        try:
            parsed = list(self._PKCard.parse(canon))
        except (KeyError, ValueError) as e:
            raise CardReadError("pokerkit_error", detail={"token": canon}, original=str(e))
        if len(parsed) != 1:
            raise CardReadError("invalid_token", detail={"token": canon})
        return card_from_pokerkit(parsed[0])

    def read(self, token: str) -> Card:
        if not isinstance(token, str):
            raise CardReadError("invalid_token", detail={"token": token})
        card = parse_card(token.strip())
        if card is not None:
            return card
        return self._read_cached(_canon_token(token))
