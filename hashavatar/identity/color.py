"""Hash-derived colours.

Every avatar uses a single hue taken from the identity's hex colour; only
lightness changes between the fill, background and text roles.
"""

from __future__ import annotations

import colorsys

from hashavatar.identity.name import Name

# Saturation forced onto the hash hue so grey-ish hashes still read as colour
_SATURATION = 0.5
# Lightness per role: dark enough for identicon squares and initials text,
# light for the initials background circle.
FOREGROUND_LIGHTNESS = 0.35
BACKGROUND_LIGHTNESS = 0.8


def hex_to_rgb(hex_color: str) -> tuple[int, int, int]:
    value = hex_color.lstrip("#")
    if len(value) != 6:
        raise ValueError(f"Expected #rrggbb, got {hex_color!r}")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)


def rgb_to_hex(rgb: tuple[int, int, int]) -> str:
    return "#{:02x}{:02x}{:02x}".format(*rgb)


def hue_of(hex_color: str) -> float:
    """Hue in [0, 1) of an ``#rrggbb`` colour."""
    r, g, b = (c / 255 for c in hex_to_rgb(hex_color))
    h, _, _ = colorsys.rgb_to_hls(r, g, b)
    return h


def hsl_color(
    name: Name,
    lightness: float = FOREGROUND_LIGHTNESS,
    saturation: float = _SATURATION,
    offset: int = 0,
) -> str:
    """Hex colour with the identity's hue and the given lightness/saturation."""
    hue = hue_of(name.hex_color(offset))
    r, g, b = colorsys.hls_to_rgb(hue, lightness, saturation)
    # Channels are truncated, not rounded
    return rgb_to_hex((int(r * 255), int(g * 255), int(b * 255)))


def identity_colors(name: Name, offset: int = 0) -> tuple[str, str]:
    """``(background, foreground)`` pair sharing one hue."""
    return (
        hsl_color(name, BACKGROUND_LIGHTNESS, offset=offset),
        hsl_color(name, FOREGROUND_LIGHTNESS, offset=offset),
    )
