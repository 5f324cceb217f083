"""Low-level number scanning shared by the transform, style and points grammars."""

from __future__ import annotations

import re
from collections.abc import Iterable

import numpy as np

from svgmodel.models.geometry import Point

WHITESPACE = " \t\n\r"
SEPARATORS = WHITESPACE + ","

# Literal accepted inside transform lists and point lists: sign, digits, one
# optional decimal point. No exponent.
_LITERAL_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

# Leading float of an attribute value, C atof style ("10px" -> 10).
_FLOAT_PREFIX_RE = re.compile(r"\s*([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX_RE = re.compile(r"\s*([+-]?\d+)")


def skip_whitespace(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in WHITESPACE:
        pos += 1
    return pos


def skip_separators(text: str, pos: int) -> int:
    """Skip whitespace and commas."""
    while pos < len(text) and text[pos] in SEPARATORS:
        pos += 1
    return pos


def scan_number(text: str, pos: int = 0) -> tuple[float | None, int]:
    """Read one numeric literal at ``pos``.

    Returns ``(value, end)``; ``value`` is None and ``end == pos`` when no
    literal starts there.
    """
    m = _LITERAL_RE.match(text, pos)
    if m is None:
        return None, pos
    return float(m.group(0)), m.end()


def parse_float(text: str | None, default: float = 0.0) -> float:
    """Locale-independent prefix parse of an attribute value."""
    if text is None:
        return default
    m = _FLOAT_PREFIX_RE.match(text)
    if m is None:
        return default
    return float(m.group(1))


def parse_int(text: str | None, default: int = 0) -> int:
    if text is None:
        return default
    m = _INT_PREFIX_RE.match(text)
    if m is None:
        return default
    return int(m.group(1))


def format_number(value: float) -> str:
    """Shortest round-tripping rendering in positional notation.

    Never uses an exponent, since the list grammars have none.
    """
    return np.format_float_positional(float(value), trim="-")


def parse_points(text: str) -> list[Point]:
    """Parse ``"x,y x,y ..."`` into points.

    Scanning stops at the first token that is not a number; a trailing x
    without its y is dropped.
    """
    points: list[Point] = []
    pos = skip_separators(text, 0)
    while pos < len(text):
        x, pos = scan_number(text, pos)
        if x is None:
            break
        pos = skip_separators(text, pos)
        y, pos = scan_number(text, pos)
        if y is None:
            break
        points.append(Point(x=x, y=y))
        pos = skip_separators(text, pos)
    return points


def points_to_string(points: Iterable[Point]) -> str:
    return " ".join(f"{format_number(p.x)},{format_number(p.y)}" for p in points)
