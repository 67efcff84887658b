"""Configuration loader with YAML parsing and environment variable substitution."""

import functools
import os
import re
from pathlib import Path

import structlog
import yaml
from pydantic import ValidationError
from pydantic_settings import SettingsError

from ..utils.logging import LogEventNames
from .schema import CaptureConfig

log = structlog.get_logger()


def substitute_env_vars(text: str) -> str:
    """
    Replace ${VAR_NAME} patterns with environment variable values.

    Args:
        text: Text containing ${VAR_NAME} patterns

    Returns:
        Text with environment variables substituted

    Raises:
        ValueError: If a referenced environment variable is not found
    """

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        value = os.environ.get(var_name)
        if value is None:
            raise ValueError(f"Environment variable {var_name} not found")
        return value

    return re.sub(r"\$\{([^}]+)\}", replacer, text)


def load_config(path: Path) -> CaptureConfig:
    """
    Load configuration from YAML file with environment variable substitution.

    Args:
        path: Path to YAML configuration file

    Returns:
        Validated CaptureConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If environment variables are missing
        ValidationError: If config doesn't match schema
    """
    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    with path.open() as f:
        raw_yaml = f.read()

    yaml_with_env = substitute_env_vars(raw_yaml)

    # An empty file means "all defaults"
    config_dict = yaml.safe_load(yaml_with_env) or {}

    # File values take precedence over STACKPRINT_* environment variables
    config = CaptureConfig(**config_dict)

    log.debug(LogEventNames.CONFIG_LOADED, path=str(path))

    return config


@functools.cache
def environment_config() -> CaptureConfig:
    """
    Process-wide configuration read once from STACKPRINT_* variables.

    Capture runs inside error handling, so an invalid variable is logged and
    the built-in defaults are used instead of raising.

    Returns:
        CaptureConfig from the environment, or the defaults if it is invalid
    """
    try:
        return CaptureConfig()
    except (ValidationError, SettingsError) as e:
        log.warning(LogEventNames.CONFIG_INVALID, error=str(e))
        return CaptureConfig.model_construct()
