"""Utility functions and helpers.

- logging: Structured logging configuration
"""

from stackprint.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_config,
    get_logger,
    unbind_context,
)

__all__ = [
    "LogEventNames",
    "LogFormat",
    "LogLevel",
    "bind_context",
    "clear_context",
    "configure_logging",
    "configure_logging_from_config",
    "get_logger",
    "unbind_context",
]
