"""
Card reader interface.

- A `CardReader` turns one textual token into a `Card`
- Readers raise `CardReadError` for anything they cannot read
- Callers that must not fail (the scoring path) go through `read_hand`
"""

from typing import Any, Protocol

from crib_core.cards import Card


class CardReader(Protocol):
    name: str

    def read(self, token: str) -> Card: ...


class CardReadError(Exception):
    """Common error type for card readers."""

    def __init__(self, error_type: str, detail: Any = None, original: str = None):
        self.error_type = error_type
        self.detail = detail
        self.original = original
        super().__init__(f"{error_type}: {detail or original or 'card read failed'}")
