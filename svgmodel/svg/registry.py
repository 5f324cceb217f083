"""Element codec registry: one reader and one writer per element kind.

Usage:
    @reader(ElementKind.CIRCLE, tag="circle")
    def read_circle(node: ET.Element) -> Circle:
        ...

    @writer(ElementKind.CIRCLE)
    def write_circle(circle: Circle, node: ET.Element) -> None:
        ...

Adding an element kind = adding it to ElementKind and creating one codec
module. ``load_codecs()`` refuses to finish while any kind is missing a reader
or a writer, so no dispatch site can silently fall behind.
"""

from __future__ import annotations

import importlib
import logging
import pkgutil
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from svgmodel.models.elements import ElementKind

logger = logging.getLogger(__name__)

ReadFn = Callable[[ET.Element], Any]
WriteFn = Callable[[Any, ET.Element], None]


@dataclass
class ElementCodec:
    kind: ElementKind
    tag: str = ""
    read: ReadFn | None = None
    write: WriteFn | None = None


class CodecRegistry:
    def __init__(self) -> None:
        self._codecs: dict[ElementKind, ElementCodec] = {}
        self._tags: dict[str, ElementKind] = {}

    def _entry(self, kind: ElementKind) -> ElementCodec:
        return self._codecs.setdefault(kind, ElementCodec(kind=kind))

    def register_reader(self, kind: ElementKind, tag: str, fn: ReadFn) -> None:
        codec = self._entry(kind)
        if codec.read is not None:
            raise ValueError(f"Duplicate reader for element kind: {kind.value}")
        if tag in self._tags:
            raise ValueError(f"Duplicate tag name: {tag}")
        codec.read = fn
        codec.tag = tag
        self._tags[tag] = kind
        logger.debug("Registered reader <%s> -> %s", tag, kind.value)

    def register_writer(self, kind: ElementKind, fn: WriteFn) -> None:
        codec = self._entry(kind)
        if codec.write is not None:
            raise ValueError(f"Duplicate writer for element kind: {kind.value}")
        codec.write = fn
        logger.debug("Registered writer %s", kind.value)

    def for_tag(self, tag: str) -> ElementCodec | None:
        kind = self._tags.get(tag)
        return self._codecs[kind] if kind is not None else None

    def for_kind(self, kind: ElementKind) -> ElementCodec:
        return self._codecs[kind]

    def missing(self) -> list[ElementKind]:
        return [
            kind
            for kind in ElementKind
            if kind not in self._codecs
            or self._codecs[kind].read is None
            or self._codecs[kind].write is None
        ]

    @property
    def tags(self) -> list[str]:
        return sorted(self._tags)

    @property
    def count(self) -> int:
        return len(self._codecs)


# Module-level dispatch table, filled once at import of the codec modules
_registry = CodecRegistry()
_loaded = False


def load_codecs() -> None:
    """Import every codec module and check that each kind is fully covered."""
    global _loaded
    if _loaded:
        return

    from svgmodel.svg import codecs

    for _, module_name, _ in pkgutil.iter_modules(codecs.__path__):
        importlib.import_module(f"{codecs.__name__}.{module_name}")

    missing = _registry.missing()
    if missing:
        raise RuntimeError(f"Element kinds without a reader and writer: {[k.value for k in missing]}")
    _loaded = True


def get_registry() -> CodecRegistry:
    load_codecs()
    return _registry


def reader(kind: ElementKind, *, tag: str):
    """Decorator to register the XML -> payload function for ``kind``."""

    def decorator(fn: ReadFn) -> ReadFn:
        _registry.register_reader(kind, tag, fn)
        return fn

    return decorator


def writer(kind: ElementKind):
    """Decorator to register the payload -> XML function for ``kind``."""

    def decorator(fn: WriteFn) -> WriteFn:
        _registry.register_writer(kind, fn)
        return fn

    return decorator
