"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hashavatar import __version__
from hashavatar.config import settings
from hashavatar.errors import AvatarError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.hashavatar_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


async def avatar_error_handler(request: Request, exc: AvatarError) -> JSONResponse:
    logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


def create_app() -> FastAPI:
    app = FastAPI(
        title="hashavatar",
        description="Deterministic SVG avatars — identicons, initials and Gravatar links",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(AvatarError, avatar_error_handler)

    from hashavatar.api.router import api_router

    app.include_router(api_router)

    return app


app = create_app()
