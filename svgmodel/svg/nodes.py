"""Attribute helpers over ``xml.etree.ElementTree`` nodes."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.svg.numbers import format_number, parse_float


def local_name(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from a tag or attribute name."""
    return tag.split("}")[-1] if "}" in tag else tag


def namespace_of(tag: str) -> str | None:
    if tag.startswith("{") and "}" in tag:
        return tag[1:tag.index("}")]
    return None


def get_attr(node: ET.Element, name: str) -> str | None:
    """Attribute by name, falling back to a namespaced one (``xlink:href``)."""
    value = node.get(name)
    if value is not None:
        return value
    for key, val in node.attrib.items():
        if local_name(key) == name:
            return val
    return None


def get_float(node: ET.Element, name: str) -> float:
    """Numeric attribute, 0 when absent or unreadable."""
    return parse_float(get_attr(node, name))


def set_number(node: ET.Element, name: str, value: float) -> None:
    node.set(name, format_number(value))


def set_nonzero(node: ET.Element, name: str, value: float) -> None:
    """Optional geometry: zero means absent and is not written."""
    if value:
        set_number(node, name, value)


def set_string(node: ET.Element, name: str, value: str | None) -> None:
    if value is not None:
        node.set(name, value)
