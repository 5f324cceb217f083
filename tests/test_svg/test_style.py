"""Tests for the style-declaration grammar."""

from svgmodel.models.style import FillRule, FontWeight, StrokeLinejoin, Style
from svgmodel.svg.style import parse_style, style_to_string


def test_unknown_property_skipped():
    style = parse_style("fill:red;stroke-width:2;unknownprop:x;stroke:blue")
    assert style.fill == "red"
    assert style.stroke_width == 2.0
    assert style.stroke == "blue"


def test_unset_fields_are_none():
    style = parse_style("fill:red")
    assert style.stroke is None
    assert style.fill_opacity is None
    assert style.fill_rule is None
    assert style.stroke_width == 1.0


def test_whitespace_and_trailing_semicolon():
    style = parse_style("  fill : #00f ;  stroke-opacity: 0.5 ; ")
    assert style.fill == "#00f"
    assert style.stroke_opacity == 0.5


def test_malformed_declarations_skipped():
    style = parse_style("fill;:red;stroke:;font-size:12px")
    assert style.fill is None
    assert style.stroke is None
    assert style.font_size == "12px"


def test_opacity_clamped():
    style = parse_style("fill-opacity:1.5;stroke-opacity:-2")
    assert style.fill_opacity == 1.0
    assert style.stroke_opacity == 0.0


def test_keywords():
    style = parse_style("fill-rule:evenodd;stroke-linejoin:miter-clip;font-weight:700")
    assert style.fill_rule == FillRule.EVENODD
    assert style.stroke_linejoin == StrokeLinejoin.MITER_CLIP
    assert style.font_weight == FontWeight.W700


def test_bad_keyword_skipped():
    style = parse_style("fill-rule:sideways;stroke:green")
    assert style.fill_rule is None
    assert style.stroke == "green"


def test_bad_number_skipped():
    assert parse_style("stroke-width:thick").stroke_width == 1.0


def test_render_only_set_fields():
    assert style_to_string(Style()) == ""
    assert style_to_string(Style(fill="red", stroke_width=2)) == "fill:red;stroke-width:2"


def test_render_order():
    style = Style(font_size="10px", stroke="blue", fill="red", fill_opacity=0.25)
    assert style_to_string(style) == "fill:red;fill-opacity:0.25;stroke:blue;font-size:10px"


def test_render_dasharray_name():
    assert style_to_string(Style(stroke_dasharray="4 2")) == "stroke-dasharray:4 2"


def test_render_parse_agree():
    style = parse_style("fill:red;stroke:blue;stroke-width:3;stroke-linecap:round;font-style:italic")
    assert parse_style(style_to_string(style)) == style
