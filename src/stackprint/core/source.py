"""Best-effort lookup of source lines for captured frames.

An unreadable file is reported as ``ok=False`` and an out-of-range line as the
``"???"`` placeholder with ``ok=True``. Neither is raised: source text is only
an enrichment of a frame, and reading it must never fail an error report.
"""

from pathlib import Path
from threading import Lock

import structlog
from cachetools import TTLCache

from stackprint.models.stack import UNKNOWN
from stackprint.utils.logging import LogEventNames

log = structlog.get_logger()

_MISSING = object()


def _load_lines(file: str) -> list[str] | None:
    """Read and split a source file, or None if it cannot be read as text."""
    try:
        content = Path(file).read_bytes().decode("utf-8")
    except (OSError, ValueError) as e:
        log.debug(LogEventNames.SOURCE_READ_FAILED, file=file, error=str(e))
        return None

    if not content:
        return []

    lines = content.split("\n")
    if content.endswith("\n"):
        lines.pop()
    return lines


def _select_line(lines: list[str], line_number: int) -> str:
    if line_number <= 0 or line_number > len(lines):
        return UNKNOWN
    # Line numbers are 1-based
    return lines[line_number - 1].strip(" \t")


def read_line(file: str, line_number: int) -> tuple[str, bool]:
    """Read a single line of source.

    Args:
        file: Path of the source file
        line_number: 1-based line number

    Returns:
        Tuple of (text, ok). ``ok`` is False only when the file could not be
        read; an out-of-range line yields ``("???", True)``.
    """
    lines = _load_lines(file)
    if lines is None:
        return "", False
    return _select_line(lines, line_number), True


class SourceLineReader:
    """Source line reader that keeps recently read files in memory.

    Frames of one stack usually share a handful of files, so split file
    contents are cached with a TTL. Unreadable files are cached as well.

    Example:
        reader = SourceLineReader(cache_size=64, cache_ttl=30)
        text, ok = reader.read_line("/app/main.py", 12)
    """

    def __init__(self, cache_size: int = 128, cache_ttl: float = 60.0) -> None:
        """Initialize the reader.

        Args:
            cache_size: Maximum number of files kept, 0 disables caching
            cache_ttl: Seconds a cached file stays valid
        """
        self._cache: TTLCache[str, list[str] | None] | None = None
        if cache_size > 0:
            self._cache = TTLCache(maxsize=cache_size, ttl=cache_ttl)
        # TTLCache is not thread-safe
        self._lock = Lock()

    def read_line(self, file: str, line_number: int) -> tuple[str, bool]:
        """Same contract as the module-level ``read_line``."""
        lines = self._get_lines(file)
        if lines is None:
            return "", False
        return _select_line(lines, line_number), True

    def _get_lines(self, file: str) -> list[str] | None:
        if self._cache is None:
            return _load_lines(file)

        with self._lock:
            cached = self._cache.get(file, _MISSING)
        if cached is not _MISSING:
            return cached  # type: ignore[return-value]

        lines = _load_lines(file)

        with self._lock:
            self._cache[file] = lines
        return lines

    def clear(self) -> None:
        """Drop all cached files."""
        if self._cache is not None:
            with self._lock:
                self._cache.clear()
