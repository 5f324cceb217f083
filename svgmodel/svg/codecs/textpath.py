"""<textpath>: text laid out along a referenced path.

The lowercase tag spelling is this format's own, not SVG's ``textPath``.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, TextPath
from svgmodel.svg.nodes import get_attr, set_string
from svgmodel.svg.registry import reader, writer
from svgmodel.svg.values import (
    parse_length_adjust,
    parse_method,
    parse_spacing,
    parse_text_length,
    text_length_to_string,
)


@reader(ElementKind.TEXTPATH, tag="textpath")
def read_textpath(node: ET.Element) -> TextPath:
    textpath = TextPath(href=get_attr(node, "href"), contents=node.text)
    if (value := get_attr(node, "lengthAdjust")) is not None:
        textpath.length_adjust = parse_length_adjust(value)
    if (value := get_attr(node, "method")) is not None:
        textpath.method = parse_method(value)
    if (value := get_attr(node, "spacing")) is not None:
        textpath.spacing = parse_spacing(value)
    if (value := get_attr(node, "startOffset")) is not None:
        textpath.start_offset = parse_text_length(value)
    if (value := get_attr(node, "textLength")) is not None:
        textpath.text_length = parse_text_length(value)
    return textpath


@writer(ElementKind.TEXTPATH)
def write_textpath(textpath: TextPath, node: ET.Element) -> None:
    set_string(node, "href", textpath.href)
    if textpath.length_adjust is not None:
        node.set("lengthAdjust", textpath.length_adjust.value)
    if textpath.method is not None:
        node.set("method", textpath.method.value)
    if textpath.spacing is not None:
        node.set("spacing", textpath.spacing.value)
    if textpath.start_offset is not None:
        node.set("startOffset", text_length_to_string(textpath.start_offset))
    if textpath.text_length is not None:
        node.set("textLength", text_length_to_string(textpath.text_length))
    node.text = textpath.contents
