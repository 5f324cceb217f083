"""Tests for SVG serializer."""

import xml.etree.ElementTree as ET

from svgmodel.models.document import Document
from svgmodel.models.elements import Element, Link, Path, Polygon, Rect, Text
from svgmodel.models.geometry import Point
from svgmodel.models.style import Style
from svgmodel.models.transform import Scale
from svgmodel.svg.parser import parse_svg
from svgmodel.svg.serializer import document_to_string, document_to_xml, element_to_xml


def test_root_attributes():
    root = document_to_xml(Document(width=64, height=32))
    assert root.tag == "svg"
    assert root.get("width") == "64"
    assert root.get("height") == "32"
    assert root.get("xmlns") == "http://www.w3.org/2000/svg"
    assert root.get("style") is None


def test_root_background_only():
    doc = Document(style=Style(background_color="#eee", fill="red"))
    assert document_to_xml(doc).get("style") == "background-color: #eee"


def test_rect_zero_radius_omitted():
    node = element_to_xml(Element(payload=Rect(width=10, height=5)))
    assert node.get("rx") is None
    assert node.get("ry") is None
    assert node.get("width") == "10"

    doc = Document(elements=[Element(payload=Rect(width=10, height=5))])
    assert parse_svg(document_to_string(doc)).elements[0].payload.rx == 0


def test_points_attribute():
    polygon = Polygon(points=[Point(x=0, y=0), Point(x=10, y=0), Point(x=10, y=10)])
    assert element_to_xml(Element(payload=polygon)).get("points") == "0,0 10,0 10,10"


def test_common_attributes_written():
    element = Element(
        id="r1",
        class_name="big",
        style=Style(fill="red"),
        transforms=[Scale(x=2, y=2)],
        payload=Rect(width=1, height=1),
    )
    node = element_to_xml(element)
    assert node.get("id") == "r1"
    assert node.get("class") == "big"
    assert node.get("style") == "fill:red"
    assert node.get("transform") == "scale(2,2)"


def test_empty_style_and_transforms_omitted():
    node = element_to_xml(Element(style=Style(), transforms=[], payload=Rect()))
    assert node.get("style") is None
    assert node.get("transform") is None


def test_path_without_data():
    assert element_to_xml(Element(payload=Path())).get("d") is None


def test_link_tag_and_children():
    link = Link(href="#a", referrer_policy="no-referrer", elements=[Element(payload=Rect())])
    node = element_to_xml(Element(payload=link))
    assert node.tag == "link"
    assert node.get("referrerpolicy") == "no-referrer"
    assert [child.tag for child in node] == ["rect"]


def test_text_contents():
    node = element_to_xml(Element(payload=Text(point=Point(x=1, y=2), contents="hi")))
    assert node.text == "hi"
    assert node.get("dx") is None


def test_string_output():
    text = document_to_string(Document(width=1, height=1, elements=[Element(payload=Rect())]))
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<svg')
    assert "\n  <rect" in text


def test_string_without_declaration_or_indent():
    text = document_to_string(Document(), indent="", xml_declaration=False)
    assert text == '<svg width="0" height="0" xmlns="http://www.w3.org/2000/svg" />'
    ET.fromstring(text)
