"""FastAPI dependency injection."""

from __future__ import annotations

from svgmodel.config import Settings, settings
from svgmodel.svg.registry import CodecRegistry, get_registry


def get_settings() -> Settings:
    return settings


def get_codecs() -> CodecRegistry:
    """The loaded element codec table."""
    return get_registry()
