"""SVG deserializer: XML text / ElementTree -> Document.

Structural problems (not well-formed XML, no root, root not ``svg``) produce
``None``; no partial document is ever returned. Everything below the root is
best effort: unknown elements are skipped, bad style or transform fragments are
dropped.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from os import PathLike
from pathlib import Path

from svgmodel.config import settings
from svgmodel.models.document import Document
from svgmodel.models.elements import Element
from svgmodel.svg.nodes import get_attr, local_name, namespace_of
from svgmodel.svg.numbers import parse_int
from svgmodel.svg.registry import get_registry
from svgmodel.svg.style import parse_style
from svgmodel.svg.transform import parse_transforms

logger = logging.getLogger(__name__)


def parse_svg(svg_text: str | bytes) -> Document | None:
    """Parse raw SVG markup into a Document."""
    try:
        root = ET.fromstring(svg_text)
    except (ET.ParseError, ValueError) as e:
        logger.warning("Failed to parse SVG: %s", e)
        return None
    return xml_to_document(root)


def read_svg(path: str | PathLike) -> Document | None:
    """Read and parse an SVG file. Unreadable files yield None."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        logger.warning("Failed to read %s: %s", path, e)
        return None
    return parse_svg(data)


def xml_to_document(root: ET.Element | None) -> Document | None:
    if root is None or not isinstance(root.tag, str):
        logger.warning("SVG has no root element")
        return None
    if local_name(root.tag) != "svg":
        logger.warning("Root element is <%s>, expected <svg>", local_name(root.tag))
        return None

    doc = Document(
        width=parse_int(get_attr(root, "width")),
        height=parse_int(get_attr(root, "height")),
        xmlns=root.get("xmlns") or namespace_of(root.tag) or settings.default_xmlns,
    )
    style = get_attr(root, "style")
    if style is not None:
        doc.style = parse_style(style)
    doc.elements = parse_elements(root)

    logger.info(
        "Parsed SVG: %d elements (%d top-level), canvas %d×%d",
        sum(1 for _ in doc.walk()),
        len(doc.elements),
        doc.width,
        doc.height,
    )
    return doc


def parse_elements(node: ET.Element) -> list[Element]:
    """Parse the children of ``node``, skipping anything unrecognized."""
    elements: list[Element] = []
    for child in node:
        element = parse_element(child)
        if element is not None:
            elements.append(element)
    return elements


def parse_element(node: ET.Element) -> Element | None:
    # Comments and processing instructions carry a callable tag
    if not isinstance(node.tag, str):
        return None

    tag = local_name(node.tag)
    codec = get_registry().for_tag(tag)
    if codec is None:
        logger.debug("Skipping unsupported element <%s>", tag)
        return None

    element = Element(payload=codec.read(node))
    element.id = get_attr(node, "id")
    element.class_name = get_attr(node, "class")

    style = get_attr(node, "style")
    if style is not None:
        element.style = parse_style(style)

    transform = get_attr(node, "transform")
    if transform is not None:
        element.transforms = parse_transforms(transform) or None

    return element
