"""Application configuration.

Settings come from .env and environment variables (pydantic-settings).
"""
from __future__ import annotations

from typing import List

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings loaded from .env and environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database_url: str = Field(
        default="sqlite:///block_animator.db",
        validation_alias=AliasChoices("DATABASE_URL", "BLOCK_ANIMATOR_DATABASE_URL"),
    )
    log_level: str = "INFO"
    block_id_prefix: str = "gsap-block"
    attribute_name: str = "gsapAnimation"
    skip_block_types: List[str] = [
        "core/block",
        "core/template",
        "core/template-part",
        "core/navigation",
    ]


settings = Settings()
