from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Bank Withdrawal API"
    database_url: str = "sqlite:///bank.db"
    log_level: str = "INFO"

    aws_region: str = "us-east-1"
    sns_topic_arn: str = "arn:aws:sns:us-east-1:YOUR_ACCOUNT_ID:YOUR_TOPIC_NAME"
    sns_endpoint_url: Optional[str] = None
    notifications_enabled: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BANK_",
        extra="ignore",
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
