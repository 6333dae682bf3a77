"""Shared avatar base — every kind renders to an HTML fragment."""

from __future__ import annotations

import abc
from dataclasses import dataclass

from hashavatar.engine.config import DEFAULT_CANVAS_SIZE
from hashavatar.errors import InvalidConfiguration
from hashavatar.identity.name import Name


@dataclass(frozen=True)
class Avatar(abc.ABC):
    name: Name
    size: int = DEFAULT_CANVAS_SIZE

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
            raise InvalidConfiguration(f"size must be a positive integer, got {self.size!r}")

    @abc.abstractmethod
    def html(self, base64: bool = False) -> str:
        """Render the avatar as an HTML fragment (SVG markup or an <img> tag)."""
