"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgmodel.models.document import Document
from svgmodel.models.geometry import Point
from svgmodel.models.style import Style
from svgmodel.models.transform import Matrix, Transform


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    env: str = "development"
    element_kinds: list[str] = Field(default_factory=list)


class ParseResponse(BaseModel):
    valid: bool
    document: Document | None = None
    element_count: int = 0


class RenderResponse(BaseModel):
    svg: str


class NormalizeResponse(BaseModel):
    valid: bool
    svg: str = ""


class TransformsResponse(BaseModel):
    transforms: list[Transform] = Field(default_factory=list)
    normalized: str = ""
    matrix: Matrix = Field(..., description="The list collapsed into one affine matrix")


class StyleResponse(BaseModel):
    style: Style
    normalized: str = ""


class PointsResponse(BaseModel):
    points: list[Point] = Field(default_factory=list)
    normalized: str = ""
