"""Avatar kinds — a closed set, each with exactly one rendering strategy."""

from __future__ import annotations

import enum
import logging
from typing import Callable

from hashavatar.avatars.base import Avatar
from hashavatar.avatars.gravatar import DEFAULT_BASE_URL, GravatarAvatar, GravatarStyle
from hashavatar.avatars.identicon import Identicon
from hashavatar.avatars.initials import InitialsAvatar
from hashavatar.engine.config import DEFAULT_CANVAS_SIZE, DEFAULT_GRID_SIZE, IdenticonConfig
from hashavatar.identity.color import hsl_color
from hashavatar.identity.name import Name

logger = logging.getLogger(__name__)


class AvatarKind(enum.IntEnum):
    INITIALS = 0
    GRAVATAR = 1
    MP = 2
    GRAVATAR_IDENTICON = 3
    MONSTERID = 4
    WAVATAR = 5
    RETRO = 6
    ROBOHASH = 7
    IDENTICON = 8

    @classmethod
    def parse(cls, value: AvatarKind | int | str) -> AvatarKind:
        """Accept the enum, its integer code, or its name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str) and not value.isdigit():
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(f"{value!r} is not a valid AvatarKind") from None
        return cls(int(value))


_GRAVATAR_STYLES: dict[AvatarKind, GravatarStyle] = {
    AvatarKind.GRAVATAR: GravatarStyle.PLAIN,
    AvatarKind.MP: GravatarStyle.MP,
    AvatarKind.GRAVATAR_IDENTICON: GravatarStyle.IDENTICON,
    AvatarKind.MONSTERID: GravatarStyle.MONSTERID,
    AvatarKind.WAVATAR: GravatarStyle.WAVATAR,
    AvatarKind.RETRO: GravatarStyle.RETRO,
    AvatarKind.ROBOHASH: GravatarStyle.ROBOHASH,
}

AvatarFactory = Callable[..., Avatar]


def _make_initials(name: Name, size: int, **options) -> Avatar:
    return InitialsAvatar(
        name,
        size=size,
        font_family=options.get("font_family", ""),
        font_weight=options.get("font_weight", ""),
    )


def _make_identicon(name: Name, size: int, **options) -> Avatar:
    config = IdenticonConfig(
        grid_size=options.get("grid_size", DEFAULT_GRID_SIZE),
        symmetric=options.get("symmetric", True),
        canvas_size=size,
        fill_color=hsl_color(name),
    )
    return Identicon(name, size=size, config=config)


def _gravatar_factory(style: GravatarStyle) -> AvatarFactory:
    def make(name: Name, size: int, **options) -> Avatar:
        return GravatarAvatar(
            name,
            size=size,
            email=options.get("email", ""),
            style=style,
            base_url=options.get("gravatar_base_url", DEFAULT_BASE_URL),
        )

    return make


_FACTORIES: dict[AvatarKind, AvatarFactory] = {
    AvatarKind.INITIALS: _make_initials,
    AvatarKind.IDENTICON: _make_identicon,
    **{kind: _gravatar_factory(style) for kind, style in _GRAVATAR_STYLES.items()},
}


def make_avatar(
    kind: AvatarKind | int | str,
    name: str | Name,
    *,
    email: str = "",
    size: int = DEFAULT_CANVAS_SIZE,
    **options,
) -> Avatar:
    """Build the avatar for ``kind``. Unknown kinds raise ValueError."""
    kind = AvatarKind.parse(kind)
    identity = name if isinstance(name, Name) else Name(name)
    logger.debug("Building %s avatar (size=%d)", kind.name, size)
    return _FACTORIES[kind](identity, size, email=email, **options)
