"""<path>: path data is kept verbatim."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgmodel.models.elements import ElementKind, Path
from svgmodel.svg.nodes import get_attr, set_string
from svgmodel.svg.registry import reader, writer


@reader(ElementKind.PATH, tag="path")
def read_path(node: ET.Element) -> Path:
    return Path(d=get_attr(node, "d"))


@writer(ElementKind.PATH)
def write_path(path: Path, node: ET.Element) -> None:
    set_string(node, "d", path.d)
