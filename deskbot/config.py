"""Application configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven settings validated at startup."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_path: Path = Field(default=Path("deskbot.db"), alias="DATABASE_PATH")
    order_result_limit: int = Field(default=10, ge=1, alias="ORDER_RESULT_LIMIT")
    history_limit: int = Field(default=50, ge=1, alias="HISTORY_LIMIT")
    # Header set by the upstream auth gateway once the caller's token is verified.
    agent_id_header: str = Field(default="X-Agent-Id", alias="AGENT_ID_HEADER")
    api_host: str = Field(default="127.0.0.1", alias="API_HOST")
    api_port: int = Field(default=8000, alias="API_PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


def load_settings() -> Settings:
    """Load and validate settings."""

    return Settings()
