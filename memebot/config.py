from __future__ import annotations

from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from memebot.services.selector import DEFAULT_SUBREDDITS


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    BOT_TOKEN: str
    WEBHOOK_URL: str = ""
    ENVIRONMENT: str = "development"

    APP_HOST: str = "0.0.0.0"
    PORT: int = 3000
    LOG_LEVEL: str = "INFO"

    # Meme API
    MEME_API_BASE_URL: str = "https://meme-api.com/gimme"
    MEME_API_TIMEOUT: float = 15.0
    MEME_API_USER_AGENT: str = "ContentBot/1.0"

    # Selection policy
    MEME_SUBREDDITS: list[str] = list(DEFAULT_SUBREDDITS)
    MEME_UPVOTE_THRESHOLDS: list[int] = [1000, 500, 100, 100]
    MEME_BOOTSTRAP_MIN_UPVOTES: Optional[int] = None
    MEME_RETRY_DELAY: float = 1.0
    RECENT_MEMES_LIMIT: int = 100

    @field_validator("MEME_SUBREDDITS", "MEME_UPVOTE_THRESHOLDS")
    @classmethod
    def _not_empty(cls, value: list) -> list:
        if not value:
            raise ValueError("must not be empty")
        return value

    @field_validator("MEME_UPVOTE_THRESHOLDS")
    @classmethod
    def _non_negative(cls, value: list[int]) -> list[int]:
        if any(v < 0 for v in value):
            raise ValueError("upvote thresholds must be non-negative")
        return value

    @field_validator("RECENT_MEMES_LIMIT")
    @classmethod
    def _positive_limit(cls, value: int) -> int:
        if value < 1:
            raise ValueError("RECENT_MEMES_LIMIT must be at least 1")
        return value

    @field_validator("MEME_API_TIMEOUT")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("MEME_API_TIMEOUT must be positive")
        return value

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"


settings = Settings()
