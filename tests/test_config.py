from decimal import Decimal

import structlog

from splitsettle.config import Settings, get_settings
from splitsettle.logging import configure_logging, get_logger
from splitsettle.models import SettlementMode


def test_defaults():
    settings = Settings()

    assert settings.settlement_mode is SettlementMode.DIRECT
    assert settings.settlement_threshold == Decimal("0.01")
    assert settings.log_level == "INFO"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SETTLEMENT_MODE", "simplified")
    monkeypatch.setenv("SETTLEMENT_THRESHOLD", "0.5")
    monkeypatch.setenv("LOG_JSON", "false")

    settings = get_settings()

    assert settings.settlement_mode is SettlementMode.SIMPLIFIED
    assert settings.settlement_threshold == Decimal("0.5")
    assert settings.log_json is False
    assert get_settings() is settings


def test_configure_logging(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "debug")
    try:
        configure_logging()
        log = get_logger("test")
        log.debug("settlement.test", value=1)
    finally:
        structlog.reset_defaults()
