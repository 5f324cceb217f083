"""<text>: anchor point, glyph offsets and the character data."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Text
from svgmodel.models.geometry import Point
from svgmodel.svg.nodes import get_attr, get_float, set_nonzero, set_number
from svgmodel.svg.registry import reader, writer
from svgmodel.svg.values import parse_length_adjust, parse_text_length, text_length_to_string


@reader(ElementKind.TEXT, tag="text")
def read_text(node: ET.Element) -> Text:
    text = Text(
        point=Point(x=get_float(node, "x"), y=get_float(node, "y")),
        dx=get_float(node, "dx"),
        dy=get_float(node, "dy"),
        rotate=get_float(node, "rotate"),
        contents=node.text,
    )
    if (value := get_attr(node, "textLength")) is not None:
        text.text_length = parse_text_length(value)
    if (value := get_attr(node, "lengthAdjust")) is not None:
        text.length_adjust = parse_length_adjust(value)
    return text


@writer(ElementKind.TEXT)
def write_text(text: Text, node: ET.Element) -> None:
    set_number(node, "x", text.point.x)
    set_number(node, "y", text.point.y)
    set_nonzero(node, "dx", text.dx)
    set_nonzero(node, "dy", text.dy)
    set_nonzero(node, "rotate", text.rotate)
    if text.text_length is not None:
        node.set("textLength", text_length_to_string(text.text_length))
    if text.length_adjust is not None:
        node.set("lengthAdjust", text.length_adjust.value)
    node.text = text.contents
