"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from hashavatar import __version__
from hashavatar.avatars import AvatarKind
from hashavatar.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        avatar_kinds=[kind.name for kind in AvatarKind],
    )
