"""Document: the root of the typed SVG tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from os import PathLike

from pydantic import Field

from svgmodel.models.base import SvgModel
from svgmodel.models.elements import Element, iter_elements
from svgmodel.models.style import Style

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class Document(SvgModel):
    """An SVG document: canvas size, namespace, optional style and elements.

    The document exclusively owns its whole subtree. ``duplicate()`` and every
    composite setter copy deeply, so two documents never share a node.
    """

    width: int = 0
    height: int = 0
    xmlns: str = SVG_NAMESPACE
    style: Style | None = None
    elements: list[Element] = Field(default_factory=list)

    def duplicate(self) -> Document:
        return self.clone()

    def get_style(self) -> Style | None:
        return self.style

    def set_style(self, style: Style | None) -> None:
        self.style = style.clone() if style is not None else None

    def get_elements(self) -> list[Element]:
        return self.elements

    def set_elements(self, elements: Iterable[Element]) -> None:
        self.elements = [el.clone() for el in elements]

    def add_element(self, element: Element) -> None:
        self.elements.append(element.clone())

    def remove_element(self, index: int) -> None:
        del self.elements[index]

    def walk(self) -> Iterator[Element]:
        """Every element in document order, descending into links and markers."""
        return iter_elements(self.elements)

    # ── Conversion ────────────────────────────────────────────────────────

    @classmethod
    def parse(cls, text: str | bytes) -> Document | None:
        from svgmodel.svg.parser import parse_svg

        return parse_svg(text)

    @classmethod
    def read(cls, path: str | PathLike) -> Document | None:
        from svgmodel.svg.parser import read_svg

        return read_svg(path)

    @classmethod
    def from_xml(cls, root) -> Document | None:
        from svgmodel.svg.parser import xml_to_document

        return xml_to_document(root)

    def to_xml(self):
        from svgmodel.svg.serializer import document_to_xml

        return document_to_xml(self)

    def to_string(self) -> str:
        from svgmodel.svg.serializer import document_to_string

        return document_to_string(self)

    def write(self, path: str | PathLike) -> bool:
        from svgmodel.svg.serializer import write_svg

        return write_svg(self, path)
