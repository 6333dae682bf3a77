"""POST /api/avatar — any avatar kind rendered to an HTML fragment."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from hashavatar.avatars import AvatarKind, make_avatar
from hashavatar.config import Settings
from hashavatar.dependencies import get_settings
from hashavatar.models.requests import AvatarRequest
from hashavatar.models.responses import AvatarResponse

router = APIRouter()


@router.post("/avatar", response_model=AvatarResponse)
async def avatar(
    req: AvatarRequest,
    settings: Settings = Depends(get_settings),
) -> AvatarResponse:
    try:
        kind = AvatarKind.parse(req.kind)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    result = make_avatar(
        kind,
        req.name,
        email=req.email,
        size=settings.default_size if req.size is None else req.size,
        grid_size=settings.default_grid_size if req.grid_size is None else req.grid_size,
        symmetric=settings.default_symmetric,
        font_family=req.font_family,
        font_weight=req.font_weight,
        gravatar_base_url=settings.gravatar_base_url,
    )
    return AvatarResponse(html=result.html(req.base64), kind=kind.name)
