"""Data models for captured call stacks."""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any, overload

UNKNOWN = "???"


@dataclass(frozen=True)
class Frame:
    """A single executed line of code in a Stack."""

    filename: str  # canonicalized, e.g. "github.com/acme/pkg/file.go"
    method: str  # bare function name, "???" when unresolvable
    line: int  # 1-based, <= 0 means unknown
    code: str = ""  # trimmed source text, empty when unavailable

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the frame for an error report payload.

        The ``code`` key is omitted entirely when no source text is available.
        """
        data: dict[str, Any] = {
            "filename": self.filename,
            "method": self.method,
            "lineno": self.line,
        }
        if self.code:
            data["code"] = self.code
        return data


@dataclass(frozen=True)
class Stack:
    """An ordered sequence of frames, innermost (throw site) first."""

    frames: tuple[Frame, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Frozen: replace any list passed in with a tuple
        object.__setattr__(self, "frames", tuple(self.frames))

    def __iter__(self) -> Iterator[Frame]:
        return iter(self.frames)

    def __len__(self) -> int:
        return len(self.frames)

    @overload
    def __getitem__(self, index: int) -> Frame: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Frame, ...]: ...

    def __getitem__(self, index: int | slice) -> Frame | tuple[Frame, ...]:
        return self.frames[index]

    def fingerprint(self) -> str:
        """Stable identifier used to group equivalent errors."""
        from stackprint.core.fingerprint import fingerprint

        return fingerprint(self)

    def to_payload(self) -> list[dict[str, Any]]:
        """Serialize all frames, preserving order."""
        return [frame.to_dict() for frame in self.frames]
