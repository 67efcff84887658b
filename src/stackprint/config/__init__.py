"""Configuration loading and validation."""

from .loader import environment_config, load_config
from .schema import (
    CaptureConfig,
    FileLoggingConfig,
    LoggingConfig,
    PathConfig,
    SourceConfig,
)

__all__ = [
    # Loader
    "load_config",
    "environment_config",
    # Root config
    "CaptureConfig",
    # Sections
    "PathConfig",
    "SourceConfig",
    "LoggingConfig",
    "FileLoggingConfig",
]
