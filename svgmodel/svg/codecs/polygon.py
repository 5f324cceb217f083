"""<polygon>: closed point list."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Polygon
from svgmodel.svg.nodes import get_attr
from svgmodel.svg.numbers import parse_points, points_to_string
from svgmodel.svg.registry import reader, writer


@reader(ElementKind.POLYGON, tag="polygon")
def read_polygon(node: ET.Element) -> Polygon:
    return Polygon(points=parse_points(get_attr(node, "points") or ""))


@writer(ElementKind.POLYGON)
def write_polygon(polygon: Polygon, node: ET.Element) -> None:
    node.set("points", points_to_string(polygon.points))
