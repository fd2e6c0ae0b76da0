"""Application configuration using pydantic-settings."""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings

DEFAULT_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """Root settings, read from ``MXIMSS_*`` environment variables."""

    model_config = {"env_prefix": "MXIMSS_"}

    environment: Literal["dev", "uat", "prod"] = "dev"
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT
