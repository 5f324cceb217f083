"""Style record attached to the document or to any element."""

from __future__ import annotations

import enum

from pydantic import Field

from svgmodel.models.base import SvgModel


class FillRule(str, enum.Enum):
    NONZERO = "nonzero"
    EVENODD = "evenodd"


class StrokeLinecap(str, enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class StrokeLinejoin(str, enum.Enum):
    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"


class FontWeight(str, enum.Enum):
    NORMAL = "normal"
    BOLDER = "bolder"
    BOLD = "bold"
    LIGHTER = "lighter"
    W100 = "100"
    W200 = "200"
    W300 = "300"
    W400 = "400"
    W500 = "500"
    W600 = "600"
    W700 = "700"
    W800 = "800"
    W900 = "900"


class FontStretch(str, enum.Enum):
    NORMAL = "normal"
    ULTRA_CONDENSED = "ultra-condensed"
    EXTRA_CONDENSED = "extra-condensed"
    CONDENSED = "condensed"
    SEMI_CONDENSED = "semi-condensed"
    SEMI_EXPANDED = "semi-expanded"
    EXPANDED = "expanded"
    EXTRA_EXPANDED = "extra-expanded"
    ULTRA_EXPANDED = "ultra-expanded"


class FontStyle(str, enum.Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class Style(SvgModel):
    """Presentation properties. ``None`` means the property was never set.

    Opacities are ``None`` when unset; 0 is a valid opacity.
    """

    fill: str | None = None
    fill_opacity: float | None = Field(default=None, ge=0.0, le=1.0)
    fill_rule: FillRule | None = None
    stroke: str | None = None
    stroke_width: float = 1.0
    stroke_opacity: float | None = Field(default=None, ge=0.0, le=1.0)
    stroke_linecap: StrokeLinecap | None = None
    stroke_dasharray: str | None = None
    stroke_linejoin: StrokeLinejoin | None = None
    background_color: str | None = None
    font_family: str | None = None
    font_weight: FontWeight | None = None
    font_stretch: FontStretch | None = None
    font_style: FontStyle | None = None
    font_size: str | None = None
