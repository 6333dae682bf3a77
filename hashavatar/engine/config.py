"""Identicon configuration — frozen, validated before any sampling happens."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

from hashavatar.errors import InvalidConfiguration

# 5×5 mirrored grid on a 100px canvas
DEFAULT_GRID_SIZE = 5
DEFAULT_CANVAS_SIZE = 100
DEFAULT_FILL_COLOR = "#000000"


@dataclass(frozen=True)
class IdenticonConfig:
    """Controls grid layout and canvas geometry for a single render."""

    # Cells per side of the pixel grid
    grid_size: int = DEFAULT_GRID_SIZE
    # Mirror columns left-to-right around the vertical centre
    symmetric: bool = True
    # Width and height of the SVG canvas in px
    canvas_size: int = DEFAULT_CANVAS_SIZE
    # Any CSS colour; usually derived from the identity hash
    fill_color: str = DEFAULT_FILL_COLOR
    # Raise HashRangeError instead of reading past the hash end as "off"
    strict_sampling: bool = False

    def __post_init__(self) -> None:
        _require_positive_int("grid_size", self.grid_size)
        _require_positive_int("canvas_size", self.canvas_size)
        if not isinstance(self.symmetric, bool):
            raise InvalidConfiguration(f"symmetric must be a bool, got {self.symmetric!r}")
        if not isinstance(self.strict_sampling, bool):
            raise InvalidConfiguration(
                f"strict_sampling must be a bool, got {self.strict_sampling!r}"
            )
        if not isinstance(self.fill_color, str) or not self.fill_color.strip():
            raise InvalidConfiguration("fill_color must be a non-empty string")

    @property
    def cell_size(self) -> float:
        return self.canvas_size / self.grid_size

    @property
    def sample_count(self) -> int:
        return self.grid_size**2

    def with_changes(self, **changes: object) -> IdenticonConfig:
        """Return a new validated config with ``changes`` applied."""
        return dataclasses.replace(self, **changes)


def _require_positive_int(name: str, value: object) -> None:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidConfiguration(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidConfiguration(f"{name} must be >= 1, got {value}")
