"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from kumiko import __version__
from kumiko.engine.color_schemes import COLOR_SCHEMES
from kumiko.engine.patterns import PATTERN_REGISTRY
from kumiko.models.responses import ColorSchemeResponse, HealthResponse, PatternResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        patterns_registered=len(PATTERN_REGISTRY),
    )


@router.get("/patterns", response_model=list[PatternResponse])
async def patterns() -> list[PatternResponse]:
    return [PatternResponse(index=i, name=entry.name) for i, entry in enumerate(PATTERN_REGISTRY)]


@router.get("/color-schemes", response_model=list[ColorSchemeResponse])
async def color_schemes() -> list[ColorSchemeResponse]:
    return [
        ColorSchemeResponse(name=scheme.name, key=scheme.key, palette=list(scheme.palette))
        for scheme in COLOR_SCHEMES
    ]
