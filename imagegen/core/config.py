"""Configuration for the image generator service."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Settings for the image generator service."""

    openai_api_key: Optional[str] = Field(default=None)
    image_model: str = Field(default="dall-e-3")
    image_size: str = Field(default="1024x1024")
    variant_count: int = Field(default=4, ge=1)
    request_timeout: float = Field(default=60.0, gt=0)
    download_timeout: float = Field(default=30.0, gt=0)
    log_level: str = Field(default="INFO")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Return cached settings instance."""
    return AppSettings()
