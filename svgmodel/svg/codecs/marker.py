"""<marker>: reusable arrowhead/decoration container with its own children."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Marker
from svgmodel.models.geometry import Point
from svgmodel.svg.nodes import get_attr, get_float, set_number
from svgmodel.svg.registry import reader, writer
from svgmodel.svg.values import orient_to_string, parse_orient


@reader(ElementKind.MARKER, tag="marker")
def read_marker(node: ET.Element) -> Marker:
    from svgmodel.svg.parser import parse_elements

    orient = get_attr(node, "orient")
    return Marker(
        marker_width=get_float(node, "markerWidth"),
        marker_height=get_float(node, "markerHeight"),
        ref=Point(x=get_float(node, "refX"), y=get_float(node, "refY")),
        orient=parse_orient(orient) if orient is not None else None,
        elements=parse_elements(node),
    )


@writer(ElementKind.MARKER)
def write_marker(marker: Marker, node: ET.Element) -> None:
    from svgmodel.svg.serializer import append_elements

    set_number(node, "markerWidth", marker.marker_width)
    set_number(node, "markerHeight", marker.marker_height)
    set_number(node, "refX", marker.ref.x)
    set_number(node, "refY", marker.ref.y)
    if marker.orient is not None:
        node.set("orient", orient_to_string(marker.orient))
    append_elements(node, marker.elements)
