from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from bowling_app.constants import DEFAULT_HIGH_SCORE_LIMIT


class Settings(BaseSettings):
    app_title: str = "Bowling Tracker API"
    high_score_limit: int = DEFAULT_HIGH_SCORE_LIMIT
    max_high_score_limit: int = 100
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="BOWLING_", env_file=".env", env_file_encoding="utf-8")


settings = Settings()
