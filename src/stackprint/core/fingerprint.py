"""Stack fingerprints for grouping equivalent errors."""

import zlib
from collections.abc import Iterable

import structlog

from stackprint.models.stack import Frame
from stackprint.utils.logging import LogEventNames

log = structlog.get_logger()


def fingerprint(stack: Iterable[Frame]) -> str:
    """Reduce a stack to a short, stable identifier.

    CRC-32 over ``filename + method + line`` of every frame, in stack order,
    rendered as lowercase hex. Source code is left out since it can change
    between deployments while the failing frame stays the same.

    Fields are concatenated without separators, so filename "ab" with method
    "c" hashes like filename "a" with method "bc". Adding a separator would
    regroup every existing error, so the format is kept as is.

    Args:
        stack: Frames, innermost first

    Returns:
        Hex digest, e.g. "cbf43926"
    """
    checksum = 0
    for frame in stack:
        data = f"{frame.filename}{frame.method}{frame.line}"
        # Undecodable path bytes come back from the OS as lone surrogates
        checksum = zlib.crc32(data.encode("utf-8", "surrogateescape"), checksum)
    digest = f"{checksum:x}"
    log.debug(LogEventNames.FINGERPRINT_COMPUTED, fingerprint=digest)
    return digest
