"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from kumiko.engine.generator import KumikoOptions, LayerOverride


class LayerOverrideModel(BaseModel):
    fg: str | None = Field(default=None, description="Line color for this layer")
    stroke_width: float | None = Field(default=None, gt=0, description="Stroke width for every copy of this layer")


class GenerateRequest(BaseModel):
    slug: str = Field(..., min_length=1, description="Seed text; the same slug always yields the same pattern")
    size: int = Field(default=800, gt=0, le=10000, description="Output width/height in pixels")
    divisions: int | None = Field(default=None, gt=0, le=200, description="Upward triangles per row")
    zoom: float = Field(default=1.0, gt=0, description="Magnification toward the canvas center")
    fg: str | None = Field(default=None, description="Line color for all layers")
    bg: str | None = Field(default=None, description="Background color")
    stroke_width: float | None = Field(default=None, gt=0, description="Stroke width for all layers")
    finalize: bool = Field(default=False, description="Drop primitives outside the viewBox")
    overflow: float = Field(default=1.0, gt=0, le=10, description="Canvas size relative to the viewBox")
    color_scheme: str | None = Field(default=None, description='Scheme name, or "random"')
    layers: list[LayerOverrideModel | None] = Field(
        default_factory=list,
        description="Per-layer overrides by position; null entries leave a layer unchanged",
    )

    def to_options(self) -> KumikoOptions:
        return KumikoOptions(
            size=self.size,
            divisions=self.divisions,
            zoom=self.zoom,
            fg=self.fg,
            bg=self.bg,
            stroke_width=self.stroke_width,
            finalize=self.finalize,
            overflow=self.overflow,
            color_scheme=self.color_scheme,
            layers=tuple(
                LayerOverride(fg=layer.fg, stroke_width=layer.stroke_width) if layer else None
                for layer in self.layers
            ),
        )


class RenderRequest(GenerateRequest):
    width: int = Field(default=1200, gt=0, le=8000, description="PNG width in pixels")
    height: int = Field(default=630, gt=0, le=8000, description="PNG height in pixels (center crop)")


class FinalizeRequest(BaseModel):
    svg: str = Field(..., description="Kumiko SVG document")
