"""Connector settings.

Single source of truth for environment-driven configuration.
"""

from __future__ import annotations
from typing import Optional
import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL: str = "https://ydc-index.io"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # ==== Credentials ====
    YOUDOTCOM_API_KEY: Optional[str] = Field(None, description="You.com API key, sent as X-API-Key")

    # ==== Transport ====
    YOUDOTCOM_BASE_URL: str = DEFAULT_BASE_URL
    HTTP_TIMEOUT_SECONDS: float = Field(30.0, gt=0)

    # ==== Batch execution ====
    MAX_CONCURRENCY: int = Field(1, ge=1, description="Items dispatched at once; 1 keeps the batch sequential")
    CONTINUE_ON_FAIL: bool = Field(False, description="Record failing items instead of aborting the batch")

    # ==== Logging ====
    LOG_LEVEL: str = "INFO"

    @field_validator("YOUDOTCOM_BASE_URL")
    @classmethod
    def _strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.upper()
