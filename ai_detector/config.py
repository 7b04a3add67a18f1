"""
AI Detector Configuration — pydantic-settings based.

All settings are read from environment variables (prefix ``AI_DETECTOR_``)
or a .env file. Every value has a default, so the analyzer runs without any
configuration at all.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Patterns ──
    patterns_file: str = Field(
        default=".ai-patterns.json",
        description="JSON pattern definitions; built-in defaults are used if missing or invalid",
    )

    # ── Analysis ──
    file_extension: str = Field(
        default=".php", description="Only files with this extension are analyzed"
    )
    opening_tag: str = Field(
        default="<?php",
        description="Opening tag marker; lines containing it are not counted as code",
    )
    suppress_by_column: bool = Field(
        default=False,
        description="Suppress a defect only when a same-line // precedes the match's own column",
    )
    default_target: str = Field(
        default="src", description="Path analyzed by the CLI when none is given"
    )

    # ── Batch ──
    max_workers: int = Field(
        default=1,
        ge=1,
        description="Worker threads for directory analysis. 1 keeps analysis sequential.",
    )
    batch_deadline_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Per-batch deadline. Files not analyzed in time are reported as skipped.",
    )

    # ── Cache ──
    cache_enabled: bool = Field(
        default=False, description="Cache per-file results keyed by content hash"
    )
    cache_ttl_seconds: int = Field(
        default=3600, description="Time-to-live for file-level cache entries"
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Root log level")

    # ── Server ──
    analysis_root: str = Field(
        default=".",
        description="HTTP path requests must resolve inside this directory",
    )
    port: int = Field(default=5001, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    model_config = {
        "env_prefix": "AI_DETECTOR_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance — imported by other modules
settings = Settings()
