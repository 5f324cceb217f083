"""Typed SVG document model."""

from svgmodel.models.document import SVG_NAMESPACE, Document
from svgmodel.models.elements import (
    Circle,
    Element,
    ElementKind,
    Ellipse,
    Image,
    Line,
    Link,
    Marker,
    Path,
    Polygon,
    Polyline,
    Rect,
    Text,
    TextPath,
    iter_elements,
)
from svgmodel.models.geometry import (
    LengthAdjust,
    LengthUnit,
    Orient,
    OrientKind,
    Point,
    TextLength,
    TextPathMethod,
    TextPathSpacing,
)
from svgmodel.models.style import (
    FillRule,
    FontStretch,
    FontStyle,
    FontWeight,
    StrokeLinecap,
    StrokeLinejoin,
    Style,
)
from svgmodel.models.transform import Matrix, Rotate, Scale, SkewX, SkewY, Transform, Translate

__all__ = [
    "SVG_NAMESPACE",
    "Circle",
    "Document",
    "Element",
    "ElementKind",
    "Ellipse",
    "FillRule",
    "FontStretch",
    "FontStyle",
    "FontWeight",
    "Image",
    "LengthAdjust",
    "LengthUnit",
    "Line",
    "Link",
    "Marker",
    "Matrix",
    "Orient",
    "OrientKind",
    "Path",
    "Point",
    "Polygon",
    "Polyline",
    "Rect",
    "Rotate",
    "Scale",
    "SkewX",
    "SkewY",
    "StrokeLinecap",
    "StrokeLinejoin",
    "Style",
    "Text",
    "TextLength",
    "TextPath",
    "TextPathMethod",
    "TextPathSpacing",
    "Transform",
    "Translate",
    "iter_elements",
]
