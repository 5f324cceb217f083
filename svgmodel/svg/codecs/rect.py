"""<rect>: position, size and corner radii. Zero radii are not written."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Rect
from svgmodel.models.geometry import Point
from svgmodel.svg.nodes import get_float, set_nonzero, set_number
from svgmodel.svg.registry import reader, writer


@reader(ElementKind.RECT, tag="rect")
def read_rect(node: ET.Element) -> Rect:
    return Rect(
        width=get_float(node, "width"),
        height=get_float(node, "height"),
        point=Point(x=get_float(node, "x"), y=get_float(node, "y")),
        rx=get_float(node, "rx"),
        ry=get_float(node, "ry"),
    )


@writer(ElementKind.RECT)
def write_rect(rect: Rect, node: ET.Element) -> None:
    set_number(node, "width", rect.width)
    set_number(node, "height", rect.height)
    set_number(node, "x", rect.point.x)
    set_number(node, "y", rect.point.y)
    set_nonzero(node, "rx", rect.rx)
    set_nonzero(node, "ry", rect.ry)
