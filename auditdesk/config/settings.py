# auditdesk/config/settings.py

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUDITDESK_",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "auditdesk"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    version: str = "0.1.0"

    # --- Record store ---
    redis_url: str = "redis://localhost:6379/0"
    record_key_prefix: str = Field("auditdesk", min_length=1)
    store_timeout_seconds: float = Field(5.0, gt=0)

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
