"""svgmodel: typed SVG document model with XML conversion."""

from svgmodel.models import Document, Element, ElementKind, Point, Style
from svgmodel.svg import (
    document_to_string,
    document_to_xml,
    parse_points,
    parse_style,
    parse_svg,
    parse_transforms,
    points_to_string,
    read_svg,
    style_to_string,
    transforms_to_string,
    write_svg,
    xml_to_document,
)

__version__ = "0.1.0"

__all__ = [
    "Document",
    "Element",
    "ElementKind",
    "Point",
    "Style",
    "document_to_string",
    "document_to_xml",
    "parse_points",
    "parse_style",
    "parse_svg",
    "parse_transforms",
    "points_to_string",
    "read_svg",
    "style_to_string",
    "transforms_to_string",
    "write_svg",
    "xml_to_document",
]
