import sys
from pathlib import Path

import pytest

SRC = Path(__file__).resolve().parents[1] / "src"

sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch):
    from unit_converter.settings import get_settings

    monkeypatch.delenv("UNIT_CONVERTER_ROUNDING", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
