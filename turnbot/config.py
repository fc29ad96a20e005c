from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Identity the bot uses when it replies
    BOT_ID: str = Field(default="turnbot")
    BOT_NAME: str = Field(default="TurnBot")

    # Channel and user stamped on activities built by the CLI
    CHANNEL_ID: str = Field(default="cli")
    USER_ID: str = Field(default="user")
    CONVERSATION_ID: str = Field(default="local")

    WELCOME_MESSAGE: str = Field(default="Hello and welcome!")

    LOG_JSON: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _validate_log_level(cls, v):  # type: ignore[override]
        name = str(v).strip().upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level {v!r}")
        return name


def load_settings() -> Settings:
    return Settings()
