"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RenderRequest(BaseModel):
    expression: str = Field(..., description="Flag expression, e.g. (h 1 (s b) 1 (s y))")
    width: int | None = Field(default=None, ge=0, description="Canvas width (default from settings)")
    height: int | None = Field(default=None, ge=0, description="Canvas height (default from settings)")
    background: str | None = Field(default=None, description="Color for unpainted pixels")
