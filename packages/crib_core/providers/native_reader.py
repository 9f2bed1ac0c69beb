"""
Reader for the glyph tokens used throughout the package ('A♠', '10♥').
"""

from crib_core.cards import Card, parse_card

from .interfaces import CardReader, CardReadError


class NativeCardReader(CardReader):
    name = "native"

    def read(self, token: str) -> Card:
        card = parse_card(token.strip() if isinstance(token, str) else token)
        if card is None:
            raise CardReadError("invalid_token", detail={"token": token})
        return card
