"""Avatar kinds and their renderers."""

from hashavatar.avatars.kinds import AvatarKind, make_avatar

__all__ = ["AvatarKind", "make_avatar"]
