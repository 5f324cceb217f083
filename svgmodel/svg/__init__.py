"""SVG <-> Document conversion and the attribute micro-grammars."""

from svgmodel.svg.numbers import format_number, parse_points, points_to_string
from svgmodel.svg.parser import parse_element, parse_elements, parse_svg, read_svg, xml_to_document
from svgmodel.svg.serializer import document_to_string, document_to_xml, element_to_xml, write_svg
from svgmodel.svg.style import parse_style, style_to_string
from svgmodel.svg.transform import parse_transforms, transforms_to_string

__all__ = [
    "document_to_string",
    "document_to_xml",
    "element_to_xml",
    "format_number",
    "parse_element",
    "parse_elements",
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
