# tests/conftest.py
import sys
from pathlib import Path

import pytest

# repo root: one level above tests/
ROOT = Path(__file__).resolve().parents[1]
PACKAGES_DIR = ROOT / "packages"

# packages/ for crib_core, root for tools/
sys.path.insert(0, str(PACKAGES_DIR))
sys.path.insert(0, str(ROOT))


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in (
        "CRIB_REJECT_DUPLICATES",
        "CRIB_SCORE_DEBUG",
        "CRIB_CARD_READER",
        "CRIB_LOCALE",
        "CRIB_CONFIG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)
    from crib_core.config_loader import clear_cache
    from crib_core.providers.selector import get_reader

    get_reader.cache_clear()
    clear_cache()
    yield
    get_reader.cache_clear()
    clear_cache()
