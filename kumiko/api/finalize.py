"""POST /api/finalize — viewport culling of an existing document."""

from __future__ import annotations

from fastapi import APIRouter

from kumiko.models.requests import FinalizeRequest
from kumiko.models.responses import FinalizeResponse
from kumiko.svg.finalize import count_primitives, finalize_svg

router = APIRouter()


@router.post("/finalize", response_model=FinalizeResponse)
def finalize(req: FinalizeRequest) -> FinalizeResponse:
    svg = finalize_svg(req.svg)
    return FinalizeResponse(
        svg=svg,
        primitives_before=count_primitives(req.svg),
        primitives_after=count_primitives(svg),
    )
