"""Style-declaration grammar: ``fill:red;stroke-width:2`` <-> Style.

Parsing is best effort. A declaration with an unknown property, no ``:``, an
empty name or value, or a value that does not convert is skipped and the rest
of the string is still processed.
"""

from __future__ import annotations

import enum
import logging
import re
from collections.abc import Callable
from typing import Any

from svgmodel.models.style import (
    FillRule,
    FontStretch,
    FontStyle,
    FontWeight,
    StrokeLinecap,
    StrokeLinejoin,
    Style,
)
from svgmodel.svg.numbers import format_number, skip_whitespace

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def _text(value: str) -> str:
    return value


def _number(value: str) -> float | None:
    m = _NUMBER_RE.match(value)
    return float(m.group(0)) if m else None


def _opacity(value: str) -> float | None:
    n = _number(value)
    if n is None:
        return None
    return min(1.0, max(0.0, n))


def _keyword(enum_type: type[enum.Enum]) -> Callable[[str], Any]:
    def convert(value: str):
        try:
            return enum_type(value)
        except ValueError:
            return None

    return convert


# CSS property -> (Style field, converter). Converters return None to reject.
_PROPERTIES: dict[str, tuple[str, Callable[[str], Any]]] = {
    "fill": ("fill", _text),
    "fill-opacity": ("fill_opacity", _opacity),
    "fill-rule": ("fill_rule", _keyword(FillRule)),
    "stroke": ("stroke", _text),
    "stroke-width": ("stroke_width", _number),
    "stroke-opacity": ("stroke_opacity", _opacity),
    "stroke-linecap": ("stroke_linecap", _keyword(StrokeLinecap)),
    "stroke-dasharray": ("stroke_dasharray", _text),
    "stroke-linejoin": ("stroke_linejoin", _keyword(StrokeLinejoin)),
    "background-color": ("background_color", _text),
    "font-family": ("font_family", _text),
    "font-weight": ("font_weight", _keyword(FontWeight)),
    "font-stretch": ("font_stretch", _keyword(FontStretch)),
    "font-style": ("font_style", _keyword(FontStyle)),
    "font-size": ("font_size", _text),
}


def parse_style(text: str) -> Style:
    """Parse a declaration list into a Style. Never raises."""
    style = Style()
    pos = 0
    while pos < len(text):
        pos = skip_whitespace(text, pos)
        end = text.find(";", pos)
        if end < 0:
            end = len(text)
        _apply_declaration(style, text[pos:end])
        pos = end + 1
    return style


def _apply_declaration(style: Style, declaration: str) -> None:
    name, sep, value = declaration.partition(":")
    name, value = name.strip(), value.strip()
    if not sep or not name or not value:
        if declaration.strip():
            logger.debug("Skipping malformed style declaration %r", declaration)
        return

    entry = _PROPERTIES.get(name)
    if entry is None:
        logger.debug("Skipping unknown style property %r", name)
        return

    field, convert = entry
    converted = convert(value)
    if converted is None:
        logger.debug("Skipping style property %r: bad value %r", name, value)
        return
    setattr(style, field, converted)


def _render(value: Any) -> str:
    if isinstance(value, enum.Enum):
        return value.value
    if isinstance(value, float):
        return format_number(value)
    return str(value)


def style_to_string(style: Style) -> str:
    """Render the properties that are set, in declaration-table order."""
    parts: list[str] = []
    for name, (field, _) in _PROPERTIES.items():
        value = getattr(style, field)
        if value is None:
            continue
        if field == "stroke_width" and value == 1.0:
            continue
        parts.append(f"{name}:{_render(value)}")
    return ";".join(parts)
