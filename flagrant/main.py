"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from flagrant import __version__
from flagrant.config import settings
from flagrant.errors import FlagError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.flagrant_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="flagrant",
        description="Flag description language — parse, resolve and rasterize flag expressions",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FlagError, _flag_error_handler)

    from flagrant.api.router import api_router

    app.include_router(api_router)

    return app


async def _flag_error_handler(request: Request, exc: FlagError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=422,
        content={"kind": exc.kind.value, "message": exc.message},
    )


app = create_app()
