# tokenkit/core/config.py

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    ENV: str = "local"

    SERVICE_NAME: str = "tokenkit"
    LOG_LEVEL: str = "INFO"

    FRONTEND_ORIGIN: str | None = None
    RATE_LIMIT: str = "600/minute"

    MAX_TEXT_LENGTH: int = 1_000_000
    TOKENIZER_CACHE_SIZE: int = 64

    BETTERSTACK_API_KEY: str | None = None  # PRODUCTION MODE ONLY
    BETTERSTACK_HOST: str = "https://in.logs.betterstack.com"  # PRODUCTION MODE ONLY

    model_config = SettingsConfigDict(
        env_file=None,
        env_file_encoding="utf-8",
    )


settings = Settings()
