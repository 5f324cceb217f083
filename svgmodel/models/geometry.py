"""Geometry and scalar value types: points, lengths, orientation."""

from __future__ import annotations

import enum

from svgmodel.models.base import SvgModel


class Point(SvgModel):
    x: float = 0.0
    y: float = 0.0


class LengthUnit(str, enum.Enum):
    NONE = "none"
    EM = "em"
    EX = "ex"
    PX = "px"
    CM = "cm"
    MM = "mm"
    IN = "in"
    PC = "pc"
    PT = "pt"
    PERCENTAGE = "percentage"


class TextLength(SvgModel):
    """A length with a unit, as used by textLength and startOffset."""

    value: float = 0.0
    unit: LengthUnit = LengthUnit.NONE


class OrientKind(str, enum.Enum):
    AUTO = "auto"
    AUTO_START_REVERSE = "auto-start-reverse"
    DEGREES = "degrees"
    RADIANS = "radians"
    GRADIANS = "gradians"
    TURNS = "turns"


class Orient(SvgModel):
    """Marker orientation: a keyword or an angle with its unit.

    ``angle`` is only meaningful for the angle kinds.
    """

    kind: OrientKind = OrientKind.AUTO
    angle: float = 0.0

    @property
    def is_angle(self) -> bool:
        return self.kind not in (OrientKind.AUTO, OrientKind.AUTO_START_REVERSE)


class LengthAdjust(str, enum.Enum):
    SPACING = "spacing"
    SPACING_AND_GLYPHS = "spacingAndGlyphs"


class TextPathMethod(str, enum.Enum):
    ALIGN = "align"
    STRETCH = "stretch"


class TextPathSpacing(str, enum.Enum):
    AUTO = "auto"
    EXACT = "exact"
