"""Pydantic models for configuration schema."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_HOSTING_PREFIXES = [
    "github.com/",
    "code.google.com/",
    "bitbucket.org/",
    "launchpad.net/",
]


class PathConfig(BaseModel):
    """Known path prefixes used to shorten source file paths."""

    stdlib_root: str | None = None  # None: detected from the running interpreter
    hosting_prefixes: list[str] = list(DEFAULT_HOSTING_PREFIXES)
    workspace_root: str | None = None
    extra_patterns: list[str] = []

    @field_validator("hosting_prefixes", "extra_patterns")
    @classmethod
    def validate_patterns(cls, v: list[str]) -> list[str]:
        """Reject blank patterns, which would match every path."""
        for pattern in v:
            if not pattern.strip():
                raise ValueError("Path patterns must not be empty")
        return v


class SourceConfig(BaseModel):
    """Source line enrichment configuration."""

    enabled: bool = True
    cache_size: int = Field(128, ge=0, description="Max cached files, 0 disables caching")
    cache_ttl: float = Field(60.0, ge=0.0, description="Seconds a cached file stays valid")


class FileLoggingConfig(BaseModel):
    """File logging configuration."""

    enabled: bool = False
    path: Path = Path("/var/log/stackprint/stackprint.log")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"
    file: FileLoggingConfig = FileLoggingConfig()


class CaptureConfig(BaseSettings):
    """Root configuration for stack capture."""

    paths: PathConfig = PathConfig()
    source: SourceConfig = SourceConfig()
    logging: LoggingConfig = LoggingConfig()
    max_frames: int | None = Field(None, ge=1)

    model_config = SettingsConfigDict(
        env_prefix="STACKPRINT_",
        env_nested_delimiter="__",
    )
