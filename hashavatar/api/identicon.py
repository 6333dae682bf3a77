"""POST /api/identicon and GET /api/identicon/{name}.svg — identicon rendering."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from hashavatar.avatars.identicon import Identicon
from hashavatar.config import Settings
from hashavatar.dependencies import get_settings
from hashavatar.engine.config import IdenticonConfig
from hashavatar.identity.color import hsl_color
from hashavatar.identity.name import Name
from hashavatar.models.requests import MAX_GRID_SIZE, MAX_SIZE, IdenticonRequest
from hashavatar.models.responses import IdenticonResponse

router = APIRouter()

# Request encoding → the one response field it populates
_ENCODING_FIELDS = {"svg": "svg", "base64": "data_uri", "html": "html"}


def build_identicon(
    name: str,
    settings: Settings,
    size: int | None = None,
    grid_size: int | None = None,
    symmetric: bool | None = None,
    hash_str: str | None = None,
) -> Identicon:
    identity = Name.with_hash(name, hash_str) if hash_str else Name(name)
    config = IdenticonConfig(
        grid_size=settings.default_grid_size if grid_size is None else grid_size,
        symmetric=settings.default_symmetric if symmetric is None else symmetric,
        canvas_size=settings.default_size if size is None else size,
        fill_color=hsl_color(identity),
    )
    return Identicon(identity, size=config.canvas_size, config=config)


@router.post("/identicon", response_model=IdenticonResponse)
async def identicon(
    req: IdenticonRequest,
    settings: Settings = Depends(get_settings),
) -> IdenticonResponse:
    avatar = build_identicon(req.name, settings, req.size, req.grid_size, req.symmetric, req.hash)
    matrix = avatar.matrix()
    image = avatar.render()
    outputs = {
        "svg": image.markup,
        "data_uri": image.data_uri,
        "html": image.html(base64=True),
    }
    if req.encoding is not None:
        selected = _ENCODING_FIELDS[req.encoding]
        outputs = {key: value for key, value in outputs.items() if key == selected}
    return IdenticonResponse(
        **outputs,
        matrix=matrix.tolist(),
        squares=image.square_count,
    )


@router.get("/identicon/{name}.svg")
async def identicon_svg(
    name: str,
    size: int | None = Query(default=None, ge=1, le=MAX_SIZE),
    grid_size: int | None = Query(default=None, ge=1, le=MAX_GRID_SIZE),
    symmetric: bool | None = None,
    settings: Settings = Depends(get_settings),
) -> Response:
    avatar = build_identicon(name, settings, size, grid_size, symmetric)
    return Response(content=avatar.svg(), media_type="image/svg+xml")
