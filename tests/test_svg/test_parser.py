"""Tests for SVG parser."""

import xml.etree.ElementTree as ET

from tests.conftest import NESTED_SVG, SHAPES_SVG, STYLED_SVG, TEXT_SVG, UNSUPPORTED_SVG

from svgmodel.models.document import SVG_NAMESPACE
from svgmodel.models.elements import ElementKind
from svgmodel.models.geometry import LengthAdjust, LengthUnit, OrientKind, TextPathMethod, TextPathSpacing
from svgmodel.models.transform import Rotate, Translate
from svgmodel.svg.parser import parse_element, parse_svg, xml_to_document


def test_parse_shapes():
    doc = parse_svg(SHAPES_SVG)
    assert doc.width == 200
    assert doc.height == 100
    assert doc.xmlns == SVG_NAMESPACE
    assert [el.kind for el in doc.elements] == [
        ElementKind.RECT,
        ElementKind.CIRCLE,
        ElementKind.ELLIPSE,
        ElementKind.LINE,
        ElementKind.POLYGON,
        ElementKind.POLYLINE,
        ElementKind.PATH,
    ]


def test_shape_geometry():
    rect, circle, ellipse, line, polygon, polyline, path = parse_svg(SHAPES_SVG).elements
    assert (rect.payload.width, rect.payload.height, rect.payload.rx) == (80, 40, 5)
    assert (rect.payload.point.x, rect.payload.point.y) == (10, 20)
    assert (circle.payload.center.x, circle.payload.r) == (50, 10)
    assert (ellipse.payload.rx, ellipse.payload.ry) == (30, 15)
    assert (line.payload.p2.x, line.payload.p2.y) == (200, 100)
    assert len(polygon.payload.points) == 3
    assert len(polyline.payload.points) == 4
    assert path.payload.d == "M10 10 L20 20 Z"


def test_common_attributes():
    doc = parse_svg(STYLED_SVG)
    assert doc.style.background_color == "#ffffff"
    rect = doc.elements[0]
    assert rect.id == "box"
    assert rect.class_name == "card"
    assert rect.style.fill == "red"
    assert rect.style.stroke == "blue"
    assert rect.style.stroke_width == 2.0
    assert rect.transforms == [Translate(x=10, y=20), Rotate(angle=45)]


def test_text_elements():
    text, textpath, image = parse_svg(TEXT_SVG).elements
    assert text.payload.contents == "Hello"
    assert text.payload.dx == 2
    assert text.payload.text_length.unit == LengthUnit.PX
    assert text.payload.length_adjust == LengthAdjust.SPACING_AND_GLYPHS

    assert textpath.kind == ElementKind.TEXTPATH
    assert textpath.payload.href == "#curve"
    assert textpath.payload.start_offset.unit == LengthUnit.PERCENTAGE
    assert textpath.payload.method == TextPathMethod.STRETCH
    assert textpath.payload.spacing == TextPathSpacing.AUTO
    assert textpath.payload.contents == "Along"

    assert image.payload.href == "icon.png"
    assert image.payload.width == 32


def test_nested_containers():
    doc = parse_svg(NESTED_SVG)
    marker = doc.elements[0]
    assert marker.kind == ElementKind.MARKER
    assert marker.id == "arrow"
    assert marker.payload.marker_width == 10
    assert (marker.payload.ref.x, marker.payload.ref.y) == (5, 5)
    assert marker.payload.orient.kind == OrientKind.AUTO_START_REVERSE

    link = marker.children()[0]
    assert link.kind == ElementKind.LINK
    assert link.payload.href == "https://example.com"
    assert link.payload.target == "_blank"
    assert link.children()[0].payload.r == 4


def test_unsupported_elements_skipped():
    doc = parse_svg(UNSUPPORTED_SVG)
    assert [el.kind for el in doc.elements] == [ElementKind.CIRCLE]


def test_invalid_xml():
    assert parse_svg("<svg") is None
    assert parse_svg("") is None


def test_wrong_root():
    assert parse_svg("<html><body/></html>") is None
    assert xml_to_document(None) is None


def test_bytes_input():
    doc = parse_svg(b'<svg width="8" height="9"><circle r="1"/></svg>')
    assert (doc.width, doc.height) == (8, 9)


def test_missing_namespace_uses_default():
    doc = parse_svg('<svg width="10px" height="abc"/>')
    assert doc.xmlns == SVG_NAMESPACE
    assert doc.width == 10
    assert doc.height == 0
    assert doc.elements == []


def test_empty_transform_left_unset():
    element = parse_element(ET.fromstring('<rect transform="bogus(1)"/>'))
    assert element.transforms is None


def test_unknown_tag_element():
    assert parse_element(ET.fromstring("<g/>")) is None
