"""Tests for the logging configuration module."""

import importlib
from pathlib import Path
from typing import Any

import pytest

from stackprint.config.schema import FileLoggingConfig, LoggingConfig
from stackprint.core.capture import capture_stack
from stackprint.utils.logging import (
    LogEventNames,
    LogFormat,
    LogLevel,
    add_context_processor,
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_config,
    get_logger,
    unbind_context,
)


class TestAddContextProcessor:
    """Tests for the add_context_processor processor."""

    def test_adds_service_name(self) -> None:
        """Test that the service name is always present."""
        result = add_context_processor(None, "info", {"event": "test"})  # type: ignore[arg-type]
        assert result["service"] == "stackprint"
        assert result["event"] == "test"

    def test_adds_version(self) -> None:
        """Test that the package version is added."""
        from stackprint._version import __version__

        result = add_context_processor(None, "info", {"event": "test"})  # type: ignore[arg-type]
        assert result["version"] == __version__


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_with_console_format(self) -> None:
        """Test configuration with console format."""
        configure_logging(level=LogLevel.DEBUG, log_format=LogFormat.CONSOLE)
        # Should not raise

    def test_configure_with_json_format(self) -> None:
        """Test configuration with JSON format."""
        configure_logging(level=LogLevel.INFO, log_format=LogFormat.JSON)
        # Should not raise

    def test_configure_with_string_values(self) -> None:
        """Test configuration with string values."""
        configure_logging(level="warning", log_format="JSON")
        # Should not raise

    def test_configure_with_file_logging(self, tmp_path: Path) -> None:
        """Test configuration with file logging."""
        log_file = tmp_path / "logs" / "test.log"
        configure_logging(
            level=LogLevel.INFO,
            log_format=LogFormat.JSON,
            file_path=log_file,
            file_enabled=True,
        )
        assert log_file.parent.exists()

    def test_configure_from_config(self, tmp_path: Path) -> None:
        """Test applying the logging section of a CaptureConfig."""
        log_file = tmp_path / "stackprint.log"
        config = LoggingConfig(
            level="DEBUG",
            format="console",
            file=FileLoggingConfig(enabled=True, path=log_file),
        )

        configure_logging_from_config(config)

        assert log_file.exists()


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_bound_logger(self) -> None:
        """Test that get_logger returns a structlog logger."""
        configure_logging()
        log = get_logger("test")
        assert log is not None


class TestContextFunctions:
    """Tests for context binding functions."""

    def test_bind_and_clear_context(self) -> None:
        """Test binding and clearing context."""
        bind_context(request_id="r-123")
        clear_context()

    def test_unbind_context(self) -> None:
        """Test unbinding specific context keys."""
        bind_context(key1="value1", key2="value2")
        unbind_context("key1")
        clear_context()


class TestEnums:
    """Tests for logging enums and event names."""

    def test_log_levels(self) -> None:
        """Test that all expected log levels exist."""
        assert [level.value for level in LogLevel] == [
            "DEBUG",
            "INFO",
            "WARNING",
            "ERROR",
            "CRITICAL",
        ]

    def test_log_formats(self) -> None:
        """Test that all expected formats exist."""
        assert LogFormat.JSON.value == "json"
        assert LogFormat.CONSOLE.value == "console"

    def test_event_names(self) -> None:
        """Test a few event names used by the capture pipeline."""
        assert LogEventNames.STACK_CAPTURED == "stack_captured"
        assert LogEventNames.SOURCE_READ_FAILED == "source_read_failed"


class RecordingLogger:
    """Stands in for a module logger and keeps every event."""

    def __init__(self) -> None:
        self.events: list[tuple[str, dict[str, Any]]] = []

    def debug(self, event: str, **kw: Any) -> None:
        self.events.append((event, kw))

    def warning(self, event: str, **kw: Any) -> None:
        self.events.append((event, kw))


class TestPipelineEvents:
    """Test that the capture pipeline logs the standard event names."""

    def test_capture_and_fingerprint_events(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test events emitted by capture_stack and fingerprint."""
        recorder = RecordingLogger()
        for name in ("capture", "fingerprint", "paths"):
            module = importlib.import_module(f"stackprint.core.{name}")
            monkeypatch.setattr(module, "log", recorder)

        capture_stack().fingerprint()

        names = [event for event, _ in recorder.events]
        assert names[0] == LogEventNames.PATTERNS_LOADED
        assert LogEventNames.STACK_CAPTURED in names
        assert names[-1] == LogEventNames.FINGERPRINT_COMPUTED

    def test_source_read_failed_event(
        self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path
    ) -> None:
        """Test the event for an unreadable source file."""
        source = importlib.import_module("stackprint.core.source")
        recorder = RecordingLogger()
        monkeypatch.setattr(source, "log", recorder)

        source.read_line(str(tmp_path / "missing.py"), 1)

        assert recorder.events[0][0] == LogEventNames.SOURCE_READ_FAILED
        assert recorder.events[0][1]["file"] == str(tmp_path / "missing.py")

    def test_config_invalid_event(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test the warning for an invalid STACKPRINT_* variable."""
        from stackprint.config import loader

        recorder = RecordingLogger()
        monkeypatch.setattr(loader, "log", recorder)
        monkeypatch.setenv("STACKPRINT_MAX_FRAMES", "0")

        loader.environment_config()

        assert [event for event, _ in recorder.events] == [LogEventNames.CONFIG_INVALID]
