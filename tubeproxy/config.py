from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"
    youtube_api_key: str = ""
    transcript_proxy_url: str | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> Settings:
    return Settings()
