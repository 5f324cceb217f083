"""Transform-list grammar: ``translate(10,20) rotate(45)`` <-> Transform models.

Parsing is partial-success: the first malformed function (unknown keyword,
missing parenthesis, bad argument count) ends the scan and everything parsed
before it is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from svgmodel.models.transform import Matrix, Rotate, Scale, SkewX, SkewY, Transform, Translate
from svgmodel.svg.numbers import format_number, scan_number, skip_separators, skip_whitespace

logger = logging.getLogger(__name__)


def _matrix(args: list[float]) -> Matrix:
    a, b, c, d, e, f = args + [0.0] * (6 - len(args))
    return Matrix(a=a, b=b, c=c, d=d, e=e, f=f)


def _translate(args: list[float]) -> Translate:
    return Translate(x=args[0], y=args[1] if len(args) > 1 else 0.0)


def _scale(args: list[float]) -> Scale:
    # scale(s) scales both axes
    return Scale(x=args[0], y=args[1] if len(args) > 1 else args[0])


def _rotate(args: list[float]) -> Rotate:
    if len(args) == 3:
        return Rotate(angle=args[0], cx=args[1], cy=args[2])
    return Rotate(angle=args[0])


# keyword -> (builder, accepted argument counts)
_FUNCTIONS: dict[str, tuple[Callable[[list[float]], Transform], frozenset[int]]] = {
    "matrix": (_matrix, frozenset(range(1, 7))),
    "translate": (_translate, frozenset({1, 2})),
    "scale": (_scale, frozenset({1, 2})),
    "rotate": (_rotate, frozenset({1, 3})),
    "skewX": (lambda args: SkewX(angle=args[0]), frozenset({1})),
    "skewY": (lambda args: SkewY(angle=args[0]), frozenset({1})),
}


def parse_transforms(text: str) -> list[Transform]:
    """Parse a transform list. Never raises; malformed input yields a shorter list."""
    transforms: list[Transform] = []
    pos = 0
    while True:
        pos = skip_whitespace(text, pos)
        if pos >= len(text):
            break
        parsed, pos = _parse_function(text, pos)
        if parsed is None:
            logger.debug("Transform list %r: stopped at offset %d", text, pos)
            break
        transforms.append(parsed)
    return transforms


def _parse_function(text: str, pos: int) -> tuple[Transform | None, int]:
    for name, (build, counts) in _FUNCTIONS.items():
        if text.startswith(name, pos):
            break
    else:
        return None, pos

    start = pos
    pos = skip_whitespace(text, pos + len(name))
    if pos >= len(text) or text[pos] != "(":
        return None, start

    args: list[float] = []
    pos = skip_separators(text, pos + 1)
    while pos < len(text) and text[pos] != ")":
        value, end = scan_number(text, pos)
        if value is None:
            return None, start
        args.append(value)
        pos = skip_separators(text, end)

    if pos >= len(text) or len(args) not in counts:
        return None, start
    return build(args), pos + 1


def _args(*values: float) -> str:
    return ",".join(format_number(v) for v in values)


def transform_to_string(transform: Transform) -> str:
    if isinstance(transform, Matrix):
        t = transform
        return f"matrix({_args(t.a, t.b, t.c, t.d, t.e, t.f)})"
    if isinstance(transform, Translate):
        return f"translate({_args(transform.x, transform.y)})"
    if isinstance(transform, Scale):
        return f"scale({_args(transform.x, transform.y)})"
    if isinstance(transform, Rotate):
        return f"rotate({_args(transform.angle, transform.cx, transform.cy)})"
    if isinstance(transform, SkewX):
        return f"skewX({_args(transform.angle)})"
    if isinstance(transform, SkewY):
        return f"skewY({_args(transform.angle)})"
    raise TypeError(f"Not a transform: {transform!r}")


def transforms_to_string(transforms: Iterable[Transform]) -> str:
    return " ".join(transform_to_string(t) for t in transforms)
