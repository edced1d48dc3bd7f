"""
noglobals Configuration — pydantic-settings based.

All settings are read from environment variables or .env file.
The exempt names and the allow-list are not settings: they live in
noglobals.core.rules and change only through code review.
"""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application-wide settings sourced from environment variables."""

    # ── Scanning ──
    source_suffix: str = Field(
        default=".go", description="Only files ending with this suffix are parsed"
    )
    test_suffix: str = Field(
        default="_test.go",
        description="Files ending with this suffix are skipped unless tests are included",
    )
    include_tests: bool = Field(
        default=False,
        description="Default for scans that do not say whether to include test files",
    )

    # ── Logging ──
    log_level: str = Field(default="INFO", description="Root logging level")

    # ── Server ──
    port: int = Field(default=5001, description="Server port")
    host: str = Field(default="0.0.0.0", description="Server bind host")
    cors_origins: list[str] = Field(
        default=["*"], description="Allowed CORS origins"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Singleton instance, imported by other modules
settings = Settings()
