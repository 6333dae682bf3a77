"""Identity inputs: the hashed name and the colours derived from it."""

from hashavatar.identity.color import hsl_color, identity_colors
from hashavatar.identity.name import Name

__all__ = ["Name", "hsl_color", "identity_colors"]
