"""Capture of the live call stack.

This module implements the StackCapturer, which walks the interpreter stack
(or an exception traceback) and turns every location into a normalized
``Frame``. Capture runs inside error handling paths, so it never raises: the
worst outcome is a stack with less detail.
"""

import functools
import sys

import structlog

from stackprint.config.loader import environment_config
from stackprint.config.schema import CaptureConfig
from stackprint.core.frames import FrameBuilder
from stackprint.core.introspection import RuntimeStackWalker, StackWalker, TracebackWalker
from stackprint.core.paths import PathCanonicalizer
from stackprint.core.source import SourceLineReader
from stackprint.models.stack import Frame, Stack
from stackprint.utils.logging import LogEventNames

log = structlog.get_logger()


class StackCapturer:
    """Builds a ``Stack`` for the current execution location.

    Example:
        capturer = create_capturer(config)
        stack = capturer.capture(skip=1)  # hide the calling helper
        report["fingerprint"] = stack.fingerprint()
    """

    def __init__(
        self,
        builder: FrameBuilder | None = None,
        max_frames: int | None = None,
    ) -> None:
        """Initialize the capturer.

        Args:
            builder: Frame builder; process defaults if None
            max_frames: Stop after this many frames; unbounded if None
        """
        self._builder = builder or FrameBuilder()
        self._max_frames = max_frames

    @property
    def builder(self) -> FrameBuilder:
        return self._builder

    def capture(self, skip: int = 0, walker: StackWalker | None = None) -> Stack:
        """Capture the call stack, innermost frame first.

        Args:
            skip: Number of innermost frames to omit. Depth 0 is the function
                that called ``capture``.
            walker: Source of stack locations; the live stack if None

        Returns:
            Stack of normalized frames, empty if ``skip`` is past the stack top
        """
        if walker is None:
            walker = RuntimeStackWalker(sys._getframe(1))
        return self._walk(walker, max(skip, 0))

    def capture_exception(self, exc: BaseException) -> Stack:
        """Build a stack from the traceback of a raised exception.

        Args:
            exc: Exception carrying a ``__traceback__``

        Returns:
            Stack with the raising frame first, empty if never raised
        """
        return self._walk(TracebackWalker(exc.__traceback__), 0)

    def _walk(self, walker: StackWalker, start: int) -> Stack:
        frames: list[Frame] = []
        depth = start
        while self._max_frames is None or len(frames) < self._max_frames:
            location = walker.location(depth)
            if location is None:
                break
            frames.append(self._builder.build_frame(location))
            depth += 1

        log.debug(LogEventNames.STACK_CAPTURED, skip=start, frames=len(frames))
        return Stack(frames=tuple(frames))


def create_capturer(config: CaptureConfig | None = None) -> StackCapturer:
    """
    Wire a capturer from configuration.

    Args:
        config: Capture configuration; read from STACKPRINT_* environment
            variables if None

    Returns:
        StackCapturer with its own path patterns and source cache
    """
    if config is None:
        config = environment_config()

    canonicalizer = PathCanonicalizer.from_config(config)
    reader = SourceLineReader(
        cache_size=config.source.cache_size,
        cache_ttl=config.source.cache_ttl,
    )
    builder = FrameBuilder(
        canonicalizer=canonicalizer,
        reader=reader,
        include_code=config.source.enabled,
    )
    return StackCapturer(builder=builder, max_frames=config.max_frames)


@functools.cache
def default_capturer() -> StackCapturer:
    """Process-wide capturer configured from STACKPRINT_* variables."""
    return create_capturer(environment_config())


def capture_stack(skip: int = 0) -> Stack:
    """Capture the caller's stack; depth 0 is the function calling this."""
    return default_capturer().capture(skip, RuntimeStackWalker(sys._getframe(1)))


def capture_exception(exc: BaseException) -> Stack:
    """Build a stack from ``exc.__traceback__``, raising frame first."""
    return default_capturer().capture_exception(exc)


def new_frame(file: str, method: str, line: int) -> Frame:
    """Build a frame the same way ``capture_stack`` would for this location."""
    return default_capturer().builder.new_frame(file, method, line)
