"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    palette: dict[str, str] = Field(default_factory=dict)


class RegionModel(BaseModel):
    left: int
    top: int
    width: int
    height: int
    color: str


class DiagnosticModel(BaseModel):
    kind: str
    message: str


class LayoutResponse(BaseModel):
    width: int
    height: int
    canonical: str = ""
    tags: list[str] = Field(default_factory=list)
    regions: list[RegionModel] = Field(default_factory=list)
    diagnostics: list[DiagnosticModel] = Field(default_factory=list)
    processing_time_ms: float = 0.0
