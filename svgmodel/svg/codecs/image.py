"""<image>: placed raster or vector reference."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Image
from svgmodel.models.geometry import Point
from svgmodel.svg.nodes import get_attr, get_float, set_number, set_string
from svgmodel.svg.registry import reader, writer


@reader(ElementKind.IMAGE, tag="image")
def read_image(node: ET.Element) -> Image:
    return Image(
        width=get_float(node, "width"),
        height=get_float(node, "height"),
        href=get_attr(node, "href"),
        point=Point(x=get_float(node, "x"), y=get_float(node, "y")),
    )


@writer(ElementKind.IMAGE)
def write_image(image: Image, node: ET.Element) -> None:
    set_number(node, "width", image.width)
    set_number(node, "height", image.height)
    set_number(node, "x", image.point.x)
    set_number(node, "y", image.point.y)
    set_string(node, "href", image.href)
