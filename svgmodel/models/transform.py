"""Transform variants. An element keeps an ordered list of these."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from svgmodel.models.base import SvgModel


class Matrix(SvgModel):
    kind: Literal["matrix"] = "matrix"
    a: float = 0.0
    b: float = 0.0
    c: float = 0.0
    d: float = 0.0
    e: float = 0.0
    f: float = 0.0


class Translate(SvgModel):
    kind: Literal["translate"] = "translate"
    x: float = 0.0
    y: float = 0.0


class Scale(SvgModel):
    kind: Literal["scale"] = "scale"
    x: float = 1.0
    y: float = 1.0


class Rotate(SvgModel):
    """Rotation by ``angle`` degrees about (cx, cy)."""

    kind: Literal["rotate"] = "rotate"
    angle: float = 0.0
    cx: float = 0.0
    cy: float = 0.0


class SkewX(SvgModel):
    kind: Literal["skewX"] = "skewX"
    angle: float = 0.0


class SkewY(SvgModel):
    kind: Literal["skewY"] = "skewY"
    angle: float = 0.0


Transform = Annotated[
    Union[Matrix, Translate, Scale, Rotate, SkewX, SkewY],
    Field(discriminator="kind"),
]
