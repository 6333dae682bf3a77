"""Initials avatar — hash-coloured circle with the name's initials on top."""

from __future__ import annotations

from dataclasses import dataclass

from hashavatar.avatars.base import Avatar
from hashavatar.engine.renderer import img_tag, to_data_uri
from hashavatar.identity.color import identity_colors
from hashavatar.svg.serializer import circle, serialize_svg, text

# Text size relative to the avatar size
DEFAULT_FONT_SIZE = 0.5
# Baseline nudge: centred text sits visually high without it
_TEXT_Y = "55%"


@dataclass(frozen=True)
class InitialsAvatar(Avatar):
    font_family: str = ""
    font_weight: str = ""
    font_size: float = DEFAULT_FONT_SIZE

    def svg(self) -> str:
        background, foreground = identity_colors(self.name)
        half = self.size / 2

        style = {
            "fill": foreground,
            "text-anchor": "middle",
            "dominant-baseline": "middle",
        }
        if self.font_weight:
            style["font-weight"] = self.font_weight
        if self.font_family:
            style["font-family"] = self.font_family
        style["font-size"] = f"{round(self.size * self.font_size)}px"

        elements = [
            circle(half, half, half, background),
            text(self.name.initials, "50%", _TEXT_Y, style),
        ]
        return serialize_svg(elements, self.size, self.size)

    def base64(self) -> str:
        return to_data_uri(self.svg())

    def html(self, base64: bool = False) -> str:
        if not base64:
            return self.svg()
        return img_tag(self.base64())
