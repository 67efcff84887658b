"""Source file path canonicalization.

Error grouping must not depend on where the code lives on the machine that ran
it. Paths are shortened to a recognizable root (standard library, a known code
hosting prefix, or the local workspace) so that the same frame produces the
same filename everywhere.

Examples:
    /usr/local/go/src/pkg/runtime/proc.c -> pkg/runtime/proc.c
    /home/foo/go/src/github.com/acme/pkg/file.go -> github.com/acme/pkg/file.go
"""

import functools
import sysconfig
from dataclasses import dataclass

import structlog

from stackprint.config.loader import environment_config
from stackprint.config.schema import CaptureConfig, PathConfig
from stackprint.utils.logging import LogEventNames

log = structlog.get_logger()

# Legacy standard library layout; everything up to and including "/src/" is dropped
LEGACY_STDLIB_MARKER = "/src/pkg/"
_LEGACY_STDLIB_OFFSET = len("/src/")


def stdlib_root() -> str:
    """Root directory of the running interpreter's standard library."""
    return sysconfig.get_paths()["stdlib"].rstrip("/") + "/"


@dataclass(frozen=True)
class KnownPathPatterns:
    """Ordered, read-only set of path prefixes recognized by the canonicalizer."""

    patterns: tuple[str, ...] = ()

    @classmethod
    def from_config(cls, config: PathConfig) -> "KnownPathPatterns":
        """Build patterns in lookup order: stdlib, hosting prefixes, workspace, extras."""
        root = config.stdlib_root or stdlib_root()
        candidates = [
            root.rstrip("/") + "/",
            *config.hosting_prefixes,
            config.workspace_root or "",
            *config.extra_patterns,
        ]
        patterns = tuple(pattern for pattern in candidates if pattern)
        log.debug(LogEventNames.PATTERNS_LOADED, count=len(patterns))
        return cls(patterns=patterns)


@functools.cache
def default_patterns() -> KnownPathPatterns:
    """Process-wide patterns, computed once from the environment."""
    return KnownPathPatterns.from_config(environment_config().paths)


class PathCanonicalizer:
    """Strips machine-specific prefixes from source file paths."""

    def __init__(self, patterns: KnownPathPatterns | None = None) -> None:
        """Initialize the canonicalizer.

        Args:
            patterns: Known prefixes to look for; the process defaults if None
        """
        self._patterns = patterns if patterns is not None else default_patterns()

    @property
    def patterns(self) -> KnownPathPatterns:
        return self._patterns

    def shorten(self, path: str) -> str:
        """Return the machine-independent form of ``path``.

        Args:
            path: Absolute or relative source file path

        Returns:
            The suffix starting at the first recognized prefix, or ``path``
            unchanged when nothing matches
        """
        idx = path.find(LEGACY_STDLIB_MARKER)
        if idx != -1:
            return path[idx + _LEGACY_STDLIB_OFFSET :]

        for pattern in self._patterns.patterns:
            idx = path.find(pattern)
            if idx != -1:
                return path[idx:]

        return path

    @classmethod
    def from_config(cls, config: CaptureConfig) -> "PathCanonicalizer":
        return cls(KnownPathPatterns.from_config(config.paths))


def shorten_file_path(path: str) -> str:
    """Shorten ``path`` using the process-wide patterns."""
    return PathCanonicalizer().shorten(path)
