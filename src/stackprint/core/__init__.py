"""Core stack capture components.

This module exports the capture pipeline:
- PathCanonicalizer: Shortens source paths to machine-independent form
- FrameBuilder: Normalizes raw locations into frames
- StackCapturer: Walks the live stack or an exception traceback
- fingerprint: Reduces a stack to a grouping identifier
"""

from stackprint.core.capture import (
    StackCapturer,
    capture_exception,
    capture_stack,
    create_capturer,
    new_frame,
)
from stackprint.core.fingerprint import fingerprint
from stackprint.core.frames import FrameBuilder
from stackprint.core.introspection import (
    Location,
    RuntimeStackWalker,
    StackWalker,
    TracebackWalker,
)
from stackprint.core.paths import KnownPathPatterns, PathCanonicalizer, shorten_file_path
from stackprint.core.source import SourceLineReader, read_line

__all__ = [
    "FrameBuilder",
    "KnownPathPatterns",
    "Location",
    "PathCanonicalizer",
    "RuntimeStackWalker",
    "SourceLineReader",
    "StackCapturer",
    "StackWalker",
    "TracebackWalker",
    "capture_exception",
    "capture_stack",
    "create_capturer",
    "fingerprint",
    "new_frame",
    "read_line",
    "shorten_file_path",
]
