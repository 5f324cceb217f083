"""<polyline>: open point list."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Polyline
from svgmodel.svg.nodes import get_attr
from svgmodel.svg.numbers import parse_points, points_to_string
from svgmodel.svg.registry import reader, writer


@reader(ElementKind.POLYLINE, tag="polyline")
def read_polyline(node: ET.Element) -> Polyline:
    return Polyline(points=parse_points(get_attr(node, "points") or ""))


@writer(ElementKind.POLYLINE)
def write_polyline(polyline: Polyline, node: ET.Element) -> None:
    node.set("points", points_to_string(polyline.points))
