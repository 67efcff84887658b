"""Narrow view of the interpreter's call stack.

Capture logic only needs "given a depth, give me a location or tell me the
stack has ended". Keeping that behind ``StackWalker`` lets the rest of the
package run against synthetic stacks in tests.
"""

import sys
from dataclasses import dataclass
from types import CodeType, FrameType, TracebackType
from typing import Protocol


@dataclass(frozen=True)
class Location:
    """Raw program location of one stack frame, before normalization."""

    file: str
    line: int
    function: str | None = None  # qualified name, None if unresolved
    handle: object | None = None  # code object the location belongs to


class StackWalker(Protocol):
    """Yields the location at a given depth, or None past the end of the stack."""

    def location(self, depth: int) -> Location | None: ...


def resolve_function_name(handle: object | None) -> str | None:
    """Qualified function name for a code object, e.g. ``Parser.parse``."""
    if not isinstance(handle, CodeType):
        return None
    return getattr(handle, "co_qualname", None) or handle.co_name or None


def _frame_location(frame: FrameType, line: int | None = None) -> Location:
    code = frame.f_code
    if line is None:
        line = frame.f_lineno
    return Location(
        file=code.co_filename,
        line=line or 0,
        function=resolve_function_name(code),
        handle=code,
    )


class RuntimeStackWalker:
    """Walks the live interpreter stack outward from an origin frame.

    Depth 0 is the origin itself; each following depth is one caller further
    out. Frames are collected lazily as deeper depths are requested.
    """

    def __init__(self, origin: FrameType | None = None) -> None:
        """Initialize the walker.

        Args:
            origin: Frame at depth 0; defaults to the caller of the constructor
        """
        if origin is None:
            origin = sys._getframe(1)
        self._frames: list[FrameType] = [origin]

    def location(self, depth: int) -> Location | None:
        if depth < 0:
            return None
        while len(self._frames) <= depth:
            parent = self._frames[-1].f_back
            if parent is None:
                return None
            self._frames.append(parent)
        return _frame_location(self._frames[depth])


class TracebackWalker:
    """Walks an exception traceback, innermost (raising) frame first."""

    def __init__(self, tb: TracebackType | None) -> None:
        entries: list[tuple[FrameType, int]] = []
        while tb is not None:
            entries.append((tb.tb_frame, tb.tb_lineno))
            tb = tb.tb_next
        entries.reverse()
        self._entries = entries

    def location(self, depth: int) -> Location | None:
        if depth < 0 or depth >= len(self._entries):
            return None
        frame, line = self._entries[depth]
        return _frame_location(frame, line)
