"""Data models and transfer objects."""

from .stack import UNKNOWN, Frame, Stack

__all__ = [
    "UNKNOWN",
    "Frame",
    "Stack",
]
