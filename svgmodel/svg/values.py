"""Small attribute values: lengths with units, marker orientation, text keywords."""

from __future__ import annotations

import re

from svgmodel.models.geometry import (
    LengthAdjust,
    LengthUnit,
    Orient,
    OrientKind,
    TextLength,
    TextPathMethod,
    TextPathSpacing,
)
from svgmodel.svg.numbers import format_number

_QUANTITY_RE = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)\s*(\S*)\s*$")

_LENGTH_SUFFIXES: dict[LengthUnit, str] = {
    LengthUnit.NONE: "",
    LengthUnit.EM: "em",
    LengthUnit.EX: "ex",
    LengthUnit.PX: "px",
    LengthUnit.CM: "cm",
    LengthUnit.MM: "mm",
    LengthUnit.IN: "in",
    LengthUnit.PC: "pc",
    LengthUnit.PT: "pt",
    LengthUnit.PERCENTAGE: "%",
}
_LENGTH_UNITS = {suffix: unit for unit, suffix in _LENGTH_SUFFIXES.items()}
# Older writers spelled the font-relative units with a trailing "s"
_LENGTH_UNITS.update({"ems": LengthUnit.EM, "exs": LengthUnit.EX})

_ANGLE_SUFFIXES: dict[OrientKind, str] = {
    OrientKind.DEGREES: "deg",
    OrientKind.RADIANS: "rad",
    OrientKind.GRADIANS: "grad",
    OrientKind.TURNS: "turn",
}
_ANGLE_UNITS = {suffix: kind for kind, suffix in _ANGLE_SUFFIXES.items()}
_ANGLE_UNITS[""] = OrientKind.DEGREES


def _quantity(text: str) -> tuple[float, str] | None:
    m = _QUANTITY_RE.match(text)
    if m is None:
        return None
    return float(m.group(1)), m.group(2)


def parse_text_length(text: str) -> TextLength | None:
    """``"12px"`` -> TextLength(12, px). An unknown suffix keeps the value, unit none."""
    q = _quantity(text)
    if q is None:
        return None
    value, suffix = q
    return TextLength(value=value, unit=_LENGTH_UNITS.get(suffix, LengthUnit.NONE))


def text_length_to_string(length: TextLength) -> str:
    return format_number(length.value) + _LENGTH_SUFFIXES[length.unit]


def parse_orient(text: str) -> Orient | None:
    keyword = text.strip()
    if keyword == "auto":
        return Orient(kind=OrientKind.AUTO)
    if keyword == "auto-start-reverse":
        return Orient(kind=OrientKind.AUTO_START_REVERSE)
    q = _quantity(keyword)
    if q is None:
        return None
    value, suffix = q
    kind = _ANGLE_UNITS.get(suffix)
    if kind is None:
        return None
    return Orient(kind=kind, angle=value)


def orient_to_string(orient: Orient) -> str:
    if orient.kind == OrientKind.AUTO:
        return "auto"
    if orient.kind == OrientKind.AUTO_START_REVERSE:
        return "auto-start-reverse"
    return format_number(orient.angle) + _ANGLE_SUFFIXES[orient.kind]


# Unrecognized keywords fall back to the SVG initial value.


def parse_length_adjust(text: str) -> LengthAdjust:
    try:
        return LengthAdjust(text.strip())
    except ValueError:
        return LengthAdjust.SPACING


def parse_method(text: str) -> TextPathMethod:
    try:
        return TextPathMethod(text.strip())
    except ValueError:
        return TextPathMethod.ALIGN


def parse_spacing(text: str) -> TextPathSpacing:
    try:
        return TextPathSpacing(text.strip())
    except ValueError:
        return TextPathSpacing.EXACT
