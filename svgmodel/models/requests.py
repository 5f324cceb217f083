"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from svgmodel.models.document import Document


class SvgRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")


class RenderRequest(BaseModel):
    document: Document = Field(..., description="Typed document to serialize")
    indent: str | None = Field(default=None, description="Indentation override; empty for one line")


class GrammarRequest(BaseModel):
    value: str = Field(..., description="Attribute value to parse (transform, style or points)")
