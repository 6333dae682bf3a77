"""Identicon avatar — a hash-driven pixel grid rendered as SVG squares."""

from __future__ import annotations

from dataclasses import dataclass

from hashavatar.avatars.base import Avatar
from hashavatar.engine.config import IdenticonConfig
from hashavatar.engine.grid import PixelGrid, build_grid
from hashavatar.engine.renderer import RenderedImage, render
from hashavatar.identity.color import hsl_color
from hashavatar.identity.name import Name


@dataclass(frozen=True)
class Identicon(Avatar):
    """Identicon for ``name``.

    The configuration is fixed at construction. ``fill_color`` defaults to the
    identity's hue and ``canvas_size`` to the avatar ``size``; use
    ``with_config`` to derive a generator with other settings.
    """

    config: IdenticonConfig | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.config is None:
            config = IdenticonConfig(canvas_size=self.size, fill_color=hsl_color(self.name))
        else:
            config = self.config
        object.__setattr__(self, "config", config)
        object.__setattr__(self, "size", config.canvas_size)

    @classmethod
    def make(cls, name: Name, **config_changes: object) -> Identicon:
        return cls(name).with_config(**config_changes)

    def with_config(self, **changes: object) -> Identicon:
        config = self.config.with_changes(**changes)
        return Identicon(self.name, size=config.canvas_size, config=config)

    def matrix(self) -> PixelGrid:
        return build_grid(self.name.hash, self.config)

    def render(self) -> RenderedImage:
        return render(self.matrix(), self.config)

    def svg(self) -> str:
        return self.render().markup

    def base64(self) -> str:
        return self.render().data_uri

    def html(self, base64: bool = False) -> str:
        return self.render().html(base64)
