"""POST /api/render and /api/layout — interpret a flag expression."""

from __future__ import annotations

import time

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from flagrant.config import settings
from flagrant.dsl.parser import to_text
from flagrant.engine.color import Color, parse_color, to_hex
from flagrant.engine.pipeline import create_pipeline
from flagrant.models.requests import RenderRequest
from flagrant.models.responses import DiagnosticModel, LayoutResponse, RegionModel

router = APIRouter()


def _canvas_size(req: RenderRequest) -> tuple[int, int]:
    width = settings.canvas_width if req.width is None else req.width
    height = settings.canvas_height if req.height is None else req.height
    if width * height > settings.max_canvas_pixels:
        raise HTTPException(
            status_code=422,
            detail=f"canvas {width}x{height} exceeds {settings.max_canvas_pixels} pixels",
        )
    return width, height


def _background(req: RenderRequest) -> Color:
    return parse_color(req.background or settings.background)


@router.post("/render")
async def render(req: RenderRequest) -> Response:
    width, height = _canvas_size(req)
    pipeline = create_pipeline()
    _, canvas = pipeline.render(req.expression, width, height, _background(req))
    return Response(content=canvas.to_png_bytes(), media_type="image/png")


@router.post("/layout", response_model=LayoutResponse)
async def layout_regions(req: RenderRequest) -> LayoutResponse:
    start = time.perf_counter()
    width, height = _canvas_size(req)
    ctx, regions = create_pipeline().layout(req.expression, width, height)
    elapsed = (time.perf_counter() - start) * 1000

    return LayoutResponse(
        width=width,
        height=height,
        canonical=to_text(ctx.symbolic),
        tags=sorted(ctx.tags),
        regions=[
            RegionModel(left=r.left, top=r.top, width=r.width, height=r.height, color=to_hex(r.color))
            for r in regions
        ],
        diagnostics=[DiagnosticModel(kind=d.kind.value, message=d.message) for d in ctx.diagnostics],
        processing_time_ms=round(elapsed, 2),
    )
