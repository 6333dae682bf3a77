"""API request models."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

# Upper bounds keep a single request from allocating a huge grid or document
MAX_GRID_SIZE = 64
MAX_SIZE = 4096


class IdenticonRequest(BaseModel):
    name: str = Field(..., description="Identity to derive the identicon from")
    size: int | None = Field(
        default=None, ge=1, le=MAX_SIZE, description="Canvas width/height in px"
    )
    grid_size: int | None = Field(
        default=None, ge=1, le=MAX_GRID_SIZE, description="Cells per side"
    )
    symmetric: bool | None = Field(default=None, description="Mirror columns left-to-right")
    hash: str | None = Field(
        default=None,
        pattern=r"^[0-9a-fA-F]{6,}$",
        description="Precomputed identity hash (hex); defaults to MD5 of the name",
    )
    encoding: Literal["svg", "base64", "html"] | None = Field(
        default=None,
        description="Only populate this output (svg, data_uri or html); all when omitted",
    )


class AvatarRequest(BaseModel):
    name: str = Field(..., description="Display name (initials, identicon and colour source)")
    email: str = Field(default="", description="Email used for Gravatar kinds")
    kind: int | str = Field(default=0, description="AvatarKind code or name")
    size: int | None = Field(
        default=None, ge=1, le=MAX_SIZE, description="Avatar width/height in px"
    )
    grid_size: int | None = Field(
        default=None, ge=1, le=MAX_GRID_SIZE, description="Identicon cells per side"
    )
    base64: bool = Field(default=False, description="Wrap SVG output in an <img> data URI")
    font_family: str = ""
    font_weight: str = ""
