"""Element variant model.

An ``Element`` carries the attributes every SVG node shares (id, class, style,
transform list) and exactly one kind-specific payload. The payload union is
discriminated on its ``kind`` literal, so the element kind is always derived
from the payload and can never disagree with it.

Link and Marker are containers: they own an ordered list of child elements,
which may themselves be containers.

Composite setters (``set_*``) store a deep copy of their argument. Assigning a
model to an attribute directly shares it, which breaks the exclusive-ownership
tree; use the setters when the caller keeps using the value.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from typing import Annotated, Literal, Union

from pydantic import Field

from svgmodel.models.base import SvgModel
from svgmodel.models.geometry import (
    LengthAdjust,
    Orient,
    Point,
    TextLength,
    TextPathMethod,
    TextPathSpacing,
)
from svgmodel.models.style import Style
from svgmodel.models.transform import Transform


class ElementKind(str, enum.Enum):
    RECT = "rect"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    LINE = "line"
    POLYGON = "polygon"
    POLYLINE = "polyline"
    PATH = "path"
    TEXT = "text"
    TEXTPATH = "textpath"
    LINK = "link"
    IMAGE = "image"
    MARKER = "marker"


# ── Shapes ────────────────────────────────────────────────────────────────


class Rect(SvgModel):
    kind: Literal["rect"] = "rect"
    width: float = 0.0
    height: float = 0.0
    point: Point = Field(default_factory=Point)
    rx: float = 0.0
    ry: float = 0.0

    def set_point(self, point: Point) -> None:
        self.point = point.clone()


class Circle(SvgModel):
    kind: Literal["circle"] = "circle"
    r: float = 0.0
    center: Point = Field(default_factory=Point)

    def set_center(self, center: Point) -> None:
        self.center = center.clone()


class Ellipse(SvgModel):
    kind: Literal["ellipse"] = "ellipse"
    rx: float = 0.0
    ry: float = 0.0
    center: Point = Field(default_factory=Point)

    def set_center(self, center: Point) -> None:
        self.center = center.clone()


class Line(SvgModel):
    kind: Literal["line"] = "line"
    p1: Point = Field(default_factory=Point)
    p2: Point = Field(default_factory=Point)

    def set_p1(self, point: Point) -> None:
        self.p1 = point.clone()

    def set_p2(self, point: Point) -> None:
        self.p2 = point.clone()


class _PointsShape(SvgModel):
    points: list[Point] = Field(default_factory=list)

    def set_points(self, points: Iterable[Point]) -> None:
        self.points = [p.clone() for p in points]

    def add_point(self, point: Point) -> None:
        self.points.append(point.clone())

    def remove_point(self, index: int) -> None:
        del self.points[index]


class Polygon(_PointsShape):
    kind: Literal["polygon"] = "polygon"


class Polyline(_PointsShape):
    kind: Literal["polyline"] = "polyline"


class Path(SvgModel):
    kind: Literal["path"] = "path"
    d: str | None = None


# ── Text ──────────────────────────────────────────────────────────────────


class Text(SvgModel):
    kind: Literal["text"] = "text"
    point: Point = Field(default_factory=Point)
    dx: float = 0.0
    dy: float = 0.0
    rotate: float = 0.0
    text_length: TextLength | None = None
    length_adjust: LengthAdjust | None = None
    contents: str | None = None

    def set_point(self, point: Point) -> None:
        self.point = point.clone()

    def set_text_length(self, text_length: TextLength | None) -> None:
        self.text_length = text_length.clone() if text_length is not None else None


class TextPath(SvgModel):
    kind: Literal["textpath"] = "textpath"
    href: str | None = None
    length_adjust: LengthAdjust | None = None
    method: TextPathMethod | None = None
    spacing: TextPathSpacing | None = None
    start_offset: TextLength | None = None
    text_length: TextLength | None = None
    contents: str | None = None

    def set_start_offset(self, start_offset: TextLength | None) -> None:
        self.start_offset = start_offset.clone() if start_offset is not None else None

    def set_text_length(self, text_length: TextLength | None) -> None:
        self.text_length = text_length.clone() if text_length is not None else None


class Image(SvgModel):
    kind: Literal["image"] = "image"
    width: float = 0.0
    height: float = 0.0
    href: str | None = None
    point: Point = Field(default_factory=Point)

    def set_point(self, point: Point) -> None:
        self.point = point.clone()


# ── Containers ────────────────────────────────────────────────────────────


class _Container(SvgModel):
    elements: list[Element] = Field(default_factory=list)

    def get_elements(self) -> list[Element]:
        return self.elements

    def set_elements(self, elements: Iterable[Element]) -> None:
        self.elements = [el.clone() for el in elements]

    def add_element(self, element: Element) -> None:
        self.elements.append(element.clone())

    def remove_element(self, index: int) -> None:
        del self.elements[index]


class Link(_Container):
    kind: Literal["link"] = "link"
    href: str | None = None
    download: str | None = None
    hreflang: str | None = None
    referrer_policy: str | None = None
    rel: str | None = None
    target: str | None = None
    type: str | None = None


class Marker(_Container):
    kind: Literal["marker"] = "marker"
    marker_width: float = 0.0
    marker_height: float = 0.0
    ref: Point = Field(default_factory=Point)
    orient: Orient | None = None

    def set_ref(self, ref: Point) -> None:
        self.ref = ref.clone()

    def set_orient(self, orient: Orient | None) -> None:
        self.orient = orient.clone() if orient is not None else None


Payload = Annotated[
    Union[Rect, Circle, Ellipse, Line, Polygon, Polyline, Path, Text, TextPath, Link, Image, Marker],
    Field(discriminator="kind"),
]

CONTAINER_KINDS = frozenset({ElementKind.LINK, ElementKind.MARKER})


def _check_payload(payload) -> None:
    if not isinstance(payload, SvgModel):
        raise TypeError(f"Not an element payload: {payload!r}")


class Element(SvgModel):
    id: str | None = None
    class_name: str | None = None
    style: Style | None = None
    transforms: list[Transform] | None = None
    payload: Payload

    @classmethod
    def new(cls, payload: SvgModel, **common) -> Element:
        """Build an element around copies of ``payload``, ``style`` and ``transforms``."""
        _check_payload(payload)
        style = common.pop("style", None)
        transforms = common.pop("transforms", None)
        element = cls(payload=payload.clone(), **common)
        element.set_style(style)
        element.set_transforms(transforms)
        return element

    @property
    def kind(self) -> ElementKind:
        return ElementKind(self.payload.kind)

    @property
    def is_container(self) -> bool:
        return self.kind in CONTAINER_KINDS

    def get_payload(self):
        return self.payload

    def set_payload(self, payload: SvgModel) -> None:
        """Replace the payload (and therefore the kind) with a copy of ``payload``."""
        _check_payload(payload)
        self.payload = payload.clone()

    def set_style(self, style: Style | None) -> None:
        self.style = style.clone() if style is not None else None

    def set_transforms(self, transforms: Iterable[Transform] | None) -> None:
        self.transforms = [t.clone() for t in transforms] if transforms is not None else None

    def children(self) -> list[Element]:
        """Child elements of a container, empty for every other kind."""
        if isinstance(self.payload, _Container):
            return self.payload.elements
        return []


_Container.model_rebuild()
Link.model_rebuild()
Marker.model_rebuild()
Element.model_rebuild()


def iter_elements(elements: Iterable[Element]) -> Iterator[Element]:
    """Depth-first, document-order traversal including container children.

    Each call returns a fresh iterator; nothing is stored on the collection.
    """
    for element in elements:
        yield element
        yield from iter_elements(element.children())
