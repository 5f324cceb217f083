"""Document conversion endpoints."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from svgmodel.models.requests import RenderRequest, SvgRequest
from svgmodel.models.responses import NormalizeResponse, ParseResponse, RenderResponse
from svgmodel.svg.parser import parse_svg
from svgmodel.svg.serializer import document_to_string

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/parse", response_model=ParseResponse)
async def parse(request: SvgRequest) -> ParseResponse:
    doc = parse_svg(request.svg)
    if doc is None:
        return ParseResponse(valid=False)
    return ParseResponse(valid=True, document=doc, element_count=sum(1 for _ in doc.walk()))


@router.post("/render", response_model=RenderResponse)
async def render(request: RenderRequest) -> RenderResponse:
    return RenderResponse(svg=document_to_string(request.document, indent=request.indent))


@router.post("/normalize", response_model=NormalizeResponse)
async def normalize(request: SvgRequest) -> NormalizeResponse:
    """Parse and re-serialize, dropping everything the model does not represent."""
    doc = parse_svg(request.svg)
    if doc is None:
        logger.info("Normalize: input is not a usable SVG document")
        return NormalizeResponse(valid=False)
    return NormalizeResponse(valid=True, svg=document_to_string(doc))
