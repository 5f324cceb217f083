"""Attribute grammar endpoints: transform lists, style declarations, point lists."""

from __future__ import annotations

from fastapi import APIRouter

from svgmodel.models.requests import GrammarRequest
from svgmodel.models.responses import PointsResponse, StyleResponse, TransformsResponse
from svgmodel.svg.matrix import to_matrix
from svgmodel.svg.numbers import parse_points, points_to_string
from svgmodel.svg.style import parse_style, style_to_string
from svgmodel.svg.transform import parse_transforms, transforms_to_string

router = APIRouter()


@router.post("/transforms", response_model=TransformsResponse)
async def transforms(request: GrammarRequest) -> TransformsResponse:
    parsed = parse_transforms(request.value)
    return TransformsResponse(
        transforms=parsed,
        normalized=transforms_to_string(parsed),
        matrix=to_matrix(parsed),
    )


@router.post("/style", response_model=StyleResponse)
async def style(request: GrammarRequest) -> StyleResponse:
    parsed = parse_style(request.value)
    return StyleResponse(style=parsed, normalized=style_to_string(parsed))


@router.post("/points", response_model=PointsResponse)
async def points(request: GrammarRequest) -> PointsResponse:
    parsed = parse_points(request.value)
    return PointsResponse(points=parsed, normalized=points_to_string(parsed))
