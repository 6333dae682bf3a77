"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    avatar_kinds: list[str] = Field(default_factory=list)


class IdenticonResponse(BaseModel):
    svg: str | None = None
    data_uri: str | None = None
    html: str | None = None
    matrix: list[list[bool]] = Field(default_factory=list)
    squares: int = 0


class AvatarResponse(BaseModel):
    html: str
    kind: str
