"""POST /api/generate and /api/render — pattern generation.

Endpoints are plain ``def`` so FastAPI runs the CPU-bound generator in its
threadpool.
"""

from __future__ import annotations

import dataclasses
import logging
import time

from fastapi import APIRouter, HTTPException
from fastapi.responses import Response

from kumiko.engine.generator import KumikoResult, generate_detailed
from kumiko.errors import RasterizationError, UnknownColorSchemeError
from kumiko.models.requests import GenerateRequest, RenderRequest
from kumiko.models.responses import GenerateResponse, LayerInfoResponse
from kumiko.utils.rasterizer import svg_to_png

logger = logging.getLogger(__name__)

router = APIRouter()


def _run(req: GenerateRequest) -> KumikoResult:
    start = time.perf_counter()
    try:
        result = generate_detailed(req.slug, req.to_options())
    except UnknownColorSchemeError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    elapsed = (time.perf_counter() - start) * 1000
    logger.info("Generated %r: %d layers, %d bytes in %.0fms", req.slug, len(result.layers), len(result.svg), elapsed)
    return result


@router.post("/generate", response_model=GenerateResponse)
def generate(req: GenerateRequest) -> GenerateResponse:
    result = _run(req)
    return GenerateResponse(
        svg=result.svg,
        layers=[LayerInfoResponse(**dataclasses.asdict(layer)) for layer in result.layers],
        color_scheme_name=result.color_scheme_name,
    )


@router.post("/render", responses={200: {"content": {"image/png": {}}}}, response_class=Response)
def render(req: RenderRequest) -> Response:
    result = _run(req)
    try:
        png = svg_to_png(result.svg, width=req.width, height=req.height)
    except RasterizationError as e:
        raise HTTPException(status_code=500, detail=str(e)) from e
    return Response(content=png, media_type="image/png")
