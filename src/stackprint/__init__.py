"""Call stack capture and fingerprinting for error reports."""

from stackprint._version import __version__
from stackprint.core import (
    StackCapturer,
    capture_exception,
    capture_stack,
    create_capturer,
    fingerprint,
    new_frame,
    read_line,
    shorten_file_path,
)
from stackprint.models import Frame, Stack

__all__ = [
    "Frame",
    "Stack",
    "StackCapturer",
    "__version__",
    "capture_exception",
    "capture_stack",
    "create_capturer",
    "fingerprint",
    "new_frame",
    "read_line",
    "shorten_file_path",
]
