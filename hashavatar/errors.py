"""Typed failures raised by the avatar engine."""

from __future__ import annotations


class AvatarError(Exception):
    """Base class for every error the engine raises on purpose."""


class InvalidConfiguration(AvatarError, ValueError):
    """Grid size, canvas size or another knob is out of its allowed range."""


class HashRangeError(AvatarError, IndexError):
    """A sample was requested past the end of the hash string."""

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Sample index {index} is out of range for a hash of length {length}")
        self.index = index
        self.length = length


class HashFormatError(AvatarError, ValueError):
    """A hash character is not a hexadecimal digit."""
