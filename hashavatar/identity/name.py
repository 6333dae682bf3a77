"""Name identity — the input string and its MD5 hash."""

from __future__ import annotations

import hashlib
import re
from dataclasses import dataclass, field

_WORD_RE = re.compile(r"[^\W\d_]+", re.UNICODE)

# Hex characters that make up a colour (#rrggbb)
_HEX_COLOR_LEN = 6


def md5_hex(value: str) -> str:
    return hashlib.md5(value.encode("utf-8")).hexdigest()


@dataclass(frozen=True)
class Name:
    """An identity value plus its derived hash. Never mutated after creation."""

    value: str
    hash: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "hash", md5_hex(self.value))

    @classmethod
    def make(cls, value: str) -> Name:
        return cls(value)

    @classmethod
    def with_hash(cls, value: str, hash_str: str) -> Name:
        """Identity whose hash was computed elsewhere (e.g. stored alongside a user)."""
        name = cls(value)
        object.__setattr__(name, "hash", hash_str)
        return name

    @property
    def initials(self) -> str:
        """Upper-cased first letter of each word: ``"Test Name"`` → ``"TN"``."""
        return "".join(word[0] for word in _WORD_RE.findall(self.value)).upper()

    def hex_color(self, offset: int = 0) -> str:
        """``#rrggbb`` read from the hash starting at ``offset``."""
        offset = max(0, min(offset, len(self.hash) - _HEX_COLOR_LEN))
        return "#" + self.hash[offset : offset + _HEX_COLOR_LEN]
