from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from splitsettle.models import DEFAULT_THRESHOLD, SettlementMode


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    settlement_mode: SettlementMode = Field(SettlementMode.DIRECT, alias="SETTLEMENT_MODE")
    settlement_threshold: Decimal = Field(DEFAULT_THRESHOLD, alias="SETTLEMENT_THRESHOLD", ge=0)
    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_json: bool = Field(True, alias="LOG_JSON")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
