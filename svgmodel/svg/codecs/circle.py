"""<circle>: centre and radius."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import Circle, ElementKind
from svgmodel.models.geometry import Point
from svgmodel.svg.nodes import get_float, set_number
from svgmodel.svg.registry import reader, writer


@reader(ElementKind.CIRCLE, tag="circle")
def read_circle(node: ET.Element) -> Circle:
    return Circle(
        r=get_float(node, "r"),
        center=Point(x=get_float(node, "cx"), y=get_float(node, "cy")),
    )


@writer(ElementKind.CIRCLE)
def write_circle(circle: Circle, node: ET.Element) -> None:
    set_number(node, "r", circle.r)
    set_number(node, "cx", circle.center.x)
    set_number(node, "cy", circle.center.y)
