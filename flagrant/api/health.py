"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from flagrant import __version__
from flagrant.engine.color import PALETTE, to_hex
from flagrant.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        palette={mnemonic: to_hex(color) for mnemonic, color in PALETTE.items()},
    )
