"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    patterns_registered: int = 0


class PatternResponse(BaseModel):
    index: int
    name: str


class ColorSchemeResponse(BaseModel):
    name: str
    key: str
    palette: list[str]


class LayerInfoResponse(BaseModel):
    pattern_index: int
    pattern_name: str
    fg: str
    stroke_width: float
    overlaps: int


class GenerateResponse(BaseModel):
    svg: str
    layers: list[LayerInfoResponse] = Field(default_factory=list)
    color_scheme_name: str | None = None


class FinalizeResponse(BaseModel):
    svg: str
    primitives_before: int = 0
    primitives_after: int = 0
