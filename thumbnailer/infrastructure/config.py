"""
Thumbnailer configuration using Pydantic Settings.
Every value can be overridden from the environment or a ``.env`` file.
"""

from __future__ import annotations

from typing import Optional

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env before any BaseSettings subclass reads env vars
load_dotenv()


class FFmpegSettings(BaseSettings):
    binary: str = ""
    ffprobe_binary: str = ""
    timeout: Optional[int] = 60

    model_config = {"env_prefix": "FFMPEG_"}


class ThumbnailSettings(BaseSettings):
    default_quality: int = Field(default=50, ge=1, le=100)
    default_count: int = Field(default=10, ge=1)
    scratch_dir: str = ""
    filename_prefix: str = "thumbnail_"
    extension: str = "jpg"
    strip_height: int = Field(default=120, gt=0)

    model_config = {"env_prefix": "THUMBNAIL_"}


class LoggingSettings(BaseSettings):
    level: str = "INFO"

    model_config = {"env_prefix": "LOG_"}


class Settings(BaseSettings):
    """Root settings aggregating all configuration sections."""

    app_env: str = "development"

    ffmpeg: FFmpegSettings = Field(default_factory=FFmpegSettings)
    thumbnail: ThumbnailSettings = Field(default_factory=ThumbnailSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


def get_settings() -> Settings:
    """Create and return application settings."""
    return Settings()
