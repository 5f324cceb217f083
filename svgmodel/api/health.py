"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svgmodel import __version__
from svgmodel.config import Settings
from svgmodel.dependencies import get_codecs, get_settings
from svgmodel.models.responses import HealthResponse
from svgmodel.svg.registry import CodecRegistry

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(
    settings: Settings = Depends(get_settings),
    codecs: CodecRegistry = Depends(get_codecs),
) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        env=settings.svgmodel_env,
        element_kinds=codecs.tags,
    )
