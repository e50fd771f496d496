import pytest

from splitsettle.config import get_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    for name in ("SETTLEMENT_MODE", "SETTLEMENT_THRESHOLD", "LOG_LEVEL", "LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
