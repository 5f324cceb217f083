"""Tests for reading and writing SVG files."""

import os
import stat

import pytest

from tests.conftest import SHAPES_SVG

from svgmodel.models.document import Document
from svgmodel.models.elements import Circle, Element
from svgmodel.svg.parser import parse_svg, read_svg
from svgmodel.svg.serializer import write_svg


def test_write_then_read(tmp_path):
    doc = parse_svg(SHAPES_SVG)
    target = tmp_path / "shapes.svg"
    assert write_svg(doc, target)
    assert read_svg(target) == doc


def test_write_replaces_existing(tmp_path):
    target = tmp_path / "out.svg"
    target.write_text("old contents")
    doc = Document(width=3, height=4, elements=[Element(payload=Circle(r=1))])
    assert doc.write(target)
    assert Document.read(target) == doc
    assert list(tmp_path.iterdir()) == [target]


def test_write_missing_directory(tmp_path):
    target = tmp_path / "missing" / "out.svg"
    assert write_svg(Document(), target) is False
    assert not target.exists()
    assert list(tmp_path.iterdir()) == []


def test_read_missing_file(tmp_path):
    assert read_svg(tmp_path / "nope.svg") is None


def test_read_invalid_file(tmp_path):
    target = tmp_path / "broken.svg"
    target.write_text("<svg><rect></svg>")
    assert read_svg(target) is None


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_new_file_mode_follows_umask(tmp_path):
    target = tmp_path / "out.svg"
    old = os.umask(0o022)
    try:
        assert write_svg(Document(), target)
    finally:
        os.umask(old)
    assert stat.S_IMODE(target.stat().st_mode) == 0o644


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_existing_file_mode_kept(tmp_path):
    target = tmp_path / "out.svg"
    target.write_text("old")
    target.chmod(0o640)
    assert write_svg(Document(), target)
    assert stat.S_IMODE(target.stat().st_mode) == 0o640
