"""Centralised configuration snapshot for hand scoring."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_LOCALE = "en"
DEFAULT_READER = "native"
CARD_READERS = ("native", "pokerkit")

_LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoringFlags:
    reject_duplicates: bool
    debug_log: bool


@dataclass(frozen=True)
class ScoringContext:
    flags: ScoringFlags
    locale: str
    card_reader: str

    @classmethod
    def build(cls) -> ScoringContext:
        flags = ScoringFlags(
            reject_duplicates=_env_flag("CRIB_REJECT_DUPLICATES", default=True),
            debug_log=_env_flag("CRIB_SCORE_DEBUG", default=False),
        )
        return cls(
            flags=flags,
            locale=_env_str("CRIB_LOCALE", DEFAULT_LOCALE),
            card_reader=_env_reader(),
        )


def _env_str(name: str, default: str) -> str:
    value = (os.getenv(name) or "").strip().lower()
    return value or default


def _env_reader() -> str:
    name = _env_str("CRIB_CARD_READER", DEFAULT_READER)
    if name not in CARD_READERS:
        _LOG.warning(
            "unknown_card_reader", extra={"requested": name, "fallback": DEFAULT_READER}
        )
        return DEFAULT_READER
    return name


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    value = raw.strip()
    if value == "":
        return bool(default)
    if default:
        # default True: only "0" disables
        return value != "0"
    # default False: only "1" enables
    return value == "1"


__all__ = ["CARD_READERS", "ScoringContext", "ScoringFlags"]
