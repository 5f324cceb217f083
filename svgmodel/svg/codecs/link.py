"""<link>: hyperlink container. Children are parsed and written recursively.

The tag is spelled ``link`` on the wire (SVG itself uses ``a``).
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Link
from svgmodel.svg.nodes import get_attr, set_string
from svgmodel.svg.registry import reader, writer

# model field -> attribute name
_ATTRIBUTES = {
    "href": "href",
    "download": "download",
    "hreflang": "hreflang",
    "referrer_policy": "referrerpolicy",
    "rel": "rel",
    "target": "target",
    "type": "type",
}


@reader(ElementKind.LINK, tag="link")
def read_link(node: ET.Element) -> Link:
    from svgmodel.svg.parser import parse_elements

    values = {field: get_attr(node, attr) for field, attr in _ATTRIBUTES.items()}
    return Link(**values, elements=parse_elements(node))


@writer(ElementKind.LINK)
def write_link(link: Link, node: ET.Element) -> None:
    from svgmodel.svg.serializer import append_elements

    for field, attr in _ATTRIBUTES.items():
        set_string(node, attr, getattr(link, field))
    append_elements(node, link.elements)
