"""Configuration settings loaded from environment variables."""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


load_dotenv()


class Settings(BaseModel):
    """Recorder settings loaded from environment variables."""

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Mismatch artifacts
    mismatch_prefix: str = Field(
        default="datarecorder-mismatch",
        min_length=1,
        description="Name prefix of numbered mismatch artifact directories",
    )
    mismatch_root: str | None = Field(
        default=None,
        description="Directory holding mismatch artifacts (system temp dir if unset)",
    )

    # Diff visualizer
    visualizer_path: str = Field(
        default="visualizer/recording_diff.html",
        min_length=1,
        description="Relative path of the diff template, searched upward from the cwd",
    )

    # Recording files
    default_extension: str = Field(
        default=".data",
        description="Extension of recording filenames derived from the test name",
    )

    model_config = {"extra": "ignore"}

    @field_validator("default_extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if len(value) <= 2 or not value.startswith("."):
            raise ValueError("extension must look like '.something'")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance loaded from environment."""
    return Settings(
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        mismatch_prefix=os.getenv("DATARECORDER_MISMATCH_PREFIX", "datarecorder-mismatch"),
        mismatch_root=os.getenv("DATARECORDER_MISMATCH_ROOT") or None,
        visualizer_path=os.getenv("DATARECORDER_VISUALIZER", "visualizer/recording_diff.html"),
        default_extension=os.getenv("DATARECORDER_EXTENSION", ".data"),
    )
