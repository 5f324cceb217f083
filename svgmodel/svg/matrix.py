"""Affine matrices for transform lists (numpy).

Each transform maps to the 3x3 homogeneous matrix SVG defines for it; a list
composes left to right, so ``translate(10) scale(2)`` scales first and then
translates, as a renderer applies it.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

import numpy as np
from numpy.typing import NDArray

from svgmodel.models.geometry import Point
from svgmodel.models.transform import Matrix, Rotate, Scale, SkewX, SkewY, Transform, Translate


def _affine(a: float, b: float, c: float, d: float, e: float, f: float) -> NDArray[np.float64]:
    return np.array([[a, c, e], [b, d, f], [0.0, 0.0, 1.0]], dtype=np.float64)


def transform_matrix(transform: Transform) -> NDArray[np.float64]:
    if isinstance(transform, Matrix):
        t = transform
        return _affine(t.a, t.b, t.c, t.d, t.e, t.f)
    if isinstance(transform, Translate):
        return _affine(1, 0, 0, 1, transform.x, transform.y)
    if isinstance(transform, Scale):
        return _affine(transform.x, 0, 0, transform.y, 0, 0)
    if isinstance(transform, Rotate):
        rad = math.radians(transform.angle)
        cos, sin = math.cos(rad), math.sin(rad)
        rotation = _affine(cos, sin, -sin, cos, 0, 0)
        if transform.cx == 0 and transform.cy == 0:
            return rotation
        # rotate(a, cx, cy) = translate(cx, cy) rotate(a) translate(-cx, -cy)
        to_center = _affine(1, 0, 0, 1, transform.cx, transform.cy)
        from_center = _affine(1, 0, 0, 1, -transform.cx, -transform.cy)
        return to_center @ rotation @ from_center
    if isinstance(transform, SkewX):
        return _affine(1, 0, math.tan(math.radians(transform.angle)), 1, 0, 0)
    if isinstance(transform, SkewY):
        return _affine(1, math.tan(math.radians(transform.angle)), 0, 1, 0, 0)
    raise TypeError(f"Not a transform: {transform!r}")


def compose(transforms: Iterable[Transform] | None) -> NDArray[np.float64]:
    """Product of the list in document order. Empty or None gives identity."""
    result = np.eye(3, dtype=np.float64)
    for transform in transforms or ():
        result = result @ transform_matrix(transform)
    return result


def to_matrix(transforms: Iterable[Transform] | None) -> Matrix:
    """Collapse a transform list into a single ``matrix(...)`` transform."""
    m = compose(transforms)
    return Matrix(
        a=float(m[0, 0]),
        b=float(m[1, 0]),
        c=float(m[0, 1]),
        d=float(m[1, 1]),
        e=float(m[0, 2]),
        f=float(m[1, 2]),
    )


def apply(transforms: Iterable[Transform] | None, point: Point) -> Point:
    """Map ``point`` through the composed list."""
    x, y, _ = compose(transforms) @ np.array([point.x, point.y, 1.0])
    return Point(x=float(x), y=float(y))
