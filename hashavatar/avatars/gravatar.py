"""Gravatar avatar — an ``<img>`` tag pointing at the Gravatar service.

Only the URL is composed here; the image itself is never fetched.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from urllib.parse import urlencode

from hashavatar.avatars.base import Avatar
from hashavatar.engine.renderer import img_tag
from hashavatar.identity.name import md5_hex

DEFAULT_BASE_URL = "https://www.gravatar.com/avatar/"


class GravatarStyle(str, enum.Enum):
    """Value of the ``d`` query parameter; PLAIN lets Gravatar pick its default."""

    PLAIN = ""
    MP = "mp"
    IDENTICON = "identicon"
    MONSTERID = "monsterid"
    WAVATAR = "wavatar"
    RETRO = "retro"
    ROBOHASH = "robohash"


@dataclass(frozen=True)
class GravatarAvatar(Avatar):
    email: str = ""
    style: GravatarStyle = GravatarStyle.PLAIN
    base_url: str = DEFAULT_BASE_URL

    @property
    def email_hash(self) -> str:
        return md5_hex(self.email.strip().lower())

    def url(self) -> str:
        params: dict[str, str | int] = {"d": self.style.value}
        # Forcing the default only makes sense when a style was picked
        if self.style is not GravatarStyle.PLAIN:
            params["f"] = "y"
        params["s"] = self.size
        return f"{self.base_url}{self.email_hash}?{urlencode(params)}"

    def html(self, base64: bool = False) -> str:
        return img_tag(self.url())
