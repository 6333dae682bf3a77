"""Render a pixel grid as filled SVG squares and encode the result."""

from __future__ import annotations

import base64
import logging
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any

import numpy as np

from hashavatar.engine.config import IdenticonConfig
from hashavatar.engine.grid import PixelGrid
from hashavatar.svg.serializer import rect, serialize_svg

logger = logging.getLogger(__name__)

DATA_URI_PREFIX = "data:image/svg+xml;base64,"


def to_data_uri(markup: str) -> str:
    return DATA_URI_PREFIX + base64.b64encode(markup.encode("utf-8")).decode("ascii")


def img_tag(src: str) -> str:
    return f'<img src="{src}" />'


@dataclass(frozen=True)
class RenderedImage:
    """A rendered SVG document; encodings are derived lazily and never change."""

    canvas_size: int
    elements: list[dict[str, Any]] = field(default_factory=list)

    @cached_property
    def markup(self) -> str:
        return serialize_svg(self.elements, self.canvas_size, self.canvas_size)

    @property
    def data_uri(self) -> str:
        return to_data_uri(self.markup)

    def html(self, base64: bool = False) -> str:
        """Raw markup, or an ``<img>`` tag wrapping the data URI when ``base64`` is set."""
        if not base64:
            return self.markup
        return img_tag(self.data_uri)

    @property
    def square_count(self) -> int:
        return len(self.elements)


def render(grid: PixelGrid, config: IdenticonConfig) -> RenderedImage:
    """One square per on cell, positioned at ``(col × cell, row × cell)``."""
    cell = config.cell_size
    squares = [
        rect(int(col) * cell, int(row) * cell, cell, cell, config.fill_color)
        for row, col in np.argwhere(grid)
    ]
    logger.debug(
        "Rendered %d×%d grid: %d squares on %dpx canvas",
        config.grid_size,
        config.grid_size,
        len(squares),
        config.canvas_size,
    )
    return RenderedImage(canvas_size=config.canvas_size, elements=squares)
