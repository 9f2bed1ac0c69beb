"""Explanation template files.

A file under CRIB_CONFIG_DIR shadows the bundled file of the same name, one
file at a time; anything the external directory lacks comes from config/.
Parsed files are cached per path and re-read when their mtime changes.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path

BUNDLED_DIR = Path(__file__).parent / "config"

_LOG = logging.getLogger(__name__)
_CACHE: dict[Path, tuple[float, dict]] = {}


def config_path(name: str) -> Path:
    ext = os.getenv("CRIB_CONFIG_DIR")
    if ext:
        p = Path(ext).expanduser() / name
        if p.is_file():
            return p
    return BUNDLED_DIR / name


def load_config(name: str) -> dict:
    """Parsed JSON object for ``name``; {} when it is missing or unusable."""
    fp = config_path(name)
    try:
        mtime = fp.stat().st_mtime
    except OSError:
        return {}

    hit = _CACHE.get(fp)
    if hit is not None and hit[0] == mtime:
        return hit[1]

    try:
        with fp.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        _LOG.warning("config_load_failed", extra={"path": str(fp), "error": str(e)})
        return {}
    if not isinstance(data, dict):
        _LOG.warning("config_not_object", extra={"path": str(fp)})
        return {}

    _CACHE[fp] = (mtime, data)
    return data


def clear_cache() -> None:
    _CACHE.clear()


__all__ = ["BUNDLED_DIR", "clear_cache", "config_path", "load_config"]
