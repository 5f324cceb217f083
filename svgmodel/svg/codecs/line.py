"""<line>: two end points."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Line
from svgmodel.models.geometry import Point
from svgmodel.svg.nodes import get_float, set_number
from svgmodel.svg.registry import reader, writer


@reader(ElementKind.LINE, tag="line")
def read_line(node: ET.Element) -> Line:
    return Line(
        p1=Point(x=get_float(node, "x1"), y=get_float(node, "y1")),
        p2=Point(x=get_float(node, "x2"), y=get_float(node, "y2")),
    )


@writer(ElementKind.LINE)
def write_line(line: Line, node: ET.Element) -> None:
    set_number(node, "x1", line.p1.x)
    set_number(node, "y1", line.p1.y)
    set_number(node, "x2", line.p2.x)
    set_number(node, "y2", line.p2.y)
