"""hashavatar — deterministic SVG avatars derived from a name hash."""

__version__ = "0.1.0"

from hashavatar.avatars import AvatarKind, make_avatar
from hashavatar.avatars.identicon import Identicon
from hashavatar.engine.config import IdenticonConfig
from hashavatar.identity.name import Name

__all__ = [
    "AvatarKind",
    "make_avatar",
    "Identicon",
    "IdenticonConfig",
    "Name",
]
