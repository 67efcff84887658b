"""Shared test fixtures for stackprint."""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from stackprint.config.loader import environment_config
from stackprint.core.capture import default_capturer
from stackprint.core.paths import KnownPathPatterns, default_patterns
from stackprint.models.stack import Frame, Stack

SAMPLE_SOURCE = """import os

def handler(event):
    \tpayload = parse(event)  \t
    return payload
"""


def _clear_process_defaults() -> None:
    environment_config.cache_clear()
    default_patterns.cache_clear()
    default_capturer.cache_clear()


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep STACKPRINT_* variables from the host out of every test."""
    for name in list(os.environ):
        if name.startswith("STACKPRINT_"):
            monkeypatch.delenv(name)

    # Process defaults are read from the environment once; rebuild them per test
    _clear_process_defaults()
    yield
    _clear_process_defaults()


@pytest.fixture
def source_file(tmp_path: Path) -> Path:
    """Write a small Python source file with mixed indentation."""
    path = tmp_path / "handler.py"
    path.write_text(SAMPLE_SOURCE)
    return path


@pytest.fixture
def go_patterns() -> KnownPathPatterns:
    """Patterns resembling a Go toolchain installation."""
    return KnownPathPatterns(
        patterns=(
            "/usr/local/go/",
            "github.com/",
            "code.google.com/",
            "bitbucket.org/",
            "launchpad.net/",
        )
    )


@pytest.fixture
def sample_stack() -> Stack:
    """A three-frame stack, innermost first."""
    return Stack(
        frames=(
            Frame("github.com/acme/app/parser.go", "parseValue", 42, "return strconv.Atoi(s)"),
            Frame("github.com/acme/app/handler.go", "Handle", 17, "v, err := parseValue(s)"),
            Frame("pkg/runtime/proc.c", "goexit", 1),
        )
    )
