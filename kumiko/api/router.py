"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from kumiko.api import finalize, generate, health

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(generate.router)
api_router.include_router(finalize.router)
