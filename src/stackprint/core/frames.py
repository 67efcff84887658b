"""Normalization of raw stack locations into report frames."""

import os
from typing import Protocol

from stackprint.core.introspection import Location
from stackprint.core.paths import PathCanonicalizer
from stackprint.core.source import read_line
from stackprint.models.stack import UNKNOWN, Frame


class LineReader(Protocol):
    def read_line(self, file: str, line_number: int) -> tuple[str, bool]: ...


class _UncachedReader:
    def read_line(self, file: str, line_number: int) -> tuple[str, bool]:
        return read_line(file, line_number)


def bare_function_name(name: str | None) -> str:
    """Drop any path-like prefix from a function name.

    Args:
        name: Resolved function name, or None if resolution failed

    Returns:
        The final path component, or "???" when nothing usable is left
    """
    if not name:
        return UNKNOWN
    for separator in ("/", os.sep):
        name = name.rsplit(separator, 1)[-1]
    return name or UNKNOWN


class FrameBuilder:
    """Builds immutable frames with canonical paths and source snippets.

    Never raises: an unresolved function becomes "???" and an unreadable file
    leaves ``Frame.code`` empty.
    """

    def __init__(
        self,
        canonicalizer: PathCanonicalizer | None = None,
        reader: LineReader | None = None,
        include_code: bool = True,
    ) -> None:
        """Initialize the builder.

        Args:
            canonicalizer: Path shortener; uses the process-wide patterns if None
            reader: Source line reader; reads files uncached if None
            include_code: Whether to look up source lines at all
        """
        self._canonicalizer = canonicalizer or PathCanonicalizer()
        self._reader: LineReader = reader or _UncachedReader()
        self._include_code = include_code

    def build_frame(self, location: Location) -> Frame:
        """Build a frame from a location produced by a stack walker."""
        return Frame(
            filename=self._shorten(location.file),
            method=bare_function_name(location.function),
            line=location.line,
            code=self._source(location.file, location.line),
        )

    def new_frame(self, file: str, method: str, line: int) -> Frame:
        """Build a frame for a caller that already knows the function name."""
        return Frame(
            filename=self._shorten(file),
            method=method or UNKNOWN,
            line=line,
            code=self._source(file, line),
        )

    def _shorten(self, file: str) -> str:
        return self._canonicalizer.shorten(file) or UNKNOWN

    def _source(self, file: str, line: int) -> str:
        if not self._include_code:
            return ""
        code, ok = self._reader.read_line(file, line)
        return code if ok else ""
