"""Viewer configuration loaded from environment variables."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global viewer settings."""

    log_level: str = "WARNING"
    chunk_size: int = Field(
        default=8192, gt=0, description="Bytes read per streamed chunk."
    )
    pager_color: Optional[bool] = Field(
        default=None, description="Passed through to click's pager; None lets click decide."
    )

    model_config = SettingsConfigDict(
        env_prefix="MODULE_BEST_PRACTICES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
