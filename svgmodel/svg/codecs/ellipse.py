"""<ellipse>: centre and the two radii."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Ellipse
from svgmodel.models.geometry import Point
from svgmodel.svg.nodes import get_float, set_number
from svgmodel.svg.registry import reader, writer


@reader(ElementKind.ELLIPSE, tag="ellipse")
def read_ellipse(node: ET.Element) -> Ellipse:
    return Ellipse(
        rx=get_float(node, "rx"),
        ry=get_float(node, "ry"),
        center=Point(x=get_float(node, "cx"), y=get_float(node, "cy")),
    )


@writer(ElementKind.ELLIPSE)
def write_ellipse(ellipse: Ellipse, node: ET.Element) -> None:
    set_number(node, "rx", ellipse.rx)
    set_number(node, "ry", ellipse.ry)
    set_number(node, "cx", ellipse.center.x)
    set_number(node, "cy", ellipse.center.y)
