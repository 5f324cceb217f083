"""SVG serializer: Document -> ElementTree -> markup / file."""

from __future__ import annotations

import logging
import os
import stat
import tempfile
import xml.etree.ElementTree as ET
from collections.abc import Iterable
from os import PathLike
from pathlib import Path

from svgmodel.config import settings
from svgmodel.models.document import Document
from svgmodel.models.elements import Element
from svgmodel.svg.registry import get_registry
from svgmodel.svg.style import style_to_string
from svgmodel.svg.transform import transforms_to_string

logger = logging.getLogger(__name__)

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


def document_to_xml(doc: Document) -> ET.Element:
    """Build the ``<svg>`` tree for ``doc``.

    The root always carries width, height and xmlns; a document style only
    contributes its background colour.
    """
    root = ET.Element("svg")
    root.set("width", "%d" % doc.width)
    root.set("height", "%d" % doc.height)
    root.set("xmlns", doc.xmlns)
    if doc.style is not None and doc.style.background_color is not None:
        root.set("style", f"background-color: {doc.style.background_color}")

    append_elements(root, doc.elements)
    return root


def append_elements(parent: ET.Element, elements: Iterable[Element]) -> None:
    for element in elements:
        parent.append(element_to_xml(element))


def element_to_xml(element: Element) -> ET.Element:
    codec = get_registry().for_kind(element.kind)
    node = ET.Element(codec.tag)
    codec.write(element.payload, node)

    if element.id is not None:
        node.set("id", element.id)
    if element.class_name is not None:
        node.set("class", element.class_name)
    if element.transforms:
        node.set("transform", transforms_to_string(element.transforms))
    if element.style is not None:
        rendered = style_to_string(element.style)
        if rendered:
            node.set("style", rendered)
    return node


def document_to_string(
    doc: Document,
    indent: str | None = None,
    xml_declaration: bool | None = None,
) -> str:
    """Render ``doc`` as SVG markup.

    ``indent`` and ``xml_declaration`` default to the configured settings; an
    empty indent writes everything on one line.
    """
    indent = settings.indent if indent is None else indent
    xml_declaration = settings.xml_declaration if xml_declaration is None else xml_declaration

    root = document_to_xml(doc)
    if indent:
        ET.indent(root, space=indent)
    body = ET.tostring(root, encoding="unicode")
    if xml_declaration:
        return f"{_XML_DECLARATION}\n{body}\n"
    return body


def _file_mode(target: Path) -> int:
    """Mode for a written file: the existing file's, else 0666 minus the umask."""
    try:
        return stat.S_IMODE(os.stat(target).st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def write_svg(doc: Document, path: str | PathLike) -> bool:
    """Write ``doc`` to ``path``. Returns False on failure, leaving no partial file.

    Output goes to a temporary file in the target directory and is renamed
    into place once complete.
    """
    target = Path(path)
    text = document_to_string(doc)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(text)
        os.chmod(tmp_name, _file_mode(target))
        os.replace(tmp_name, target)
    except OSError as e:
        logger.warning("Failed to write %s: %s", target, e)
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        return False

    logger.debug("Wrote %s (%d bytes)", target, len(text))
    return True
