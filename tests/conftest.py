"""Shared test fixtures."""

from __future__ import annotations

import pytest


# Sample SVGs covering every element kind

SHAPES_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100">
  <rect width="80" height="40" x="10" y="20" rx="5" ry="5"/>
  <circle cx="50" cy="50" r="10"/>
  <ellipse cx="100" cy="50" rx="30" ry="15"/>
  <line x1="0" y1="0" x2="200" y2="100"/>
  <polygon points="0,0 10,0 10,10"/>
  <polyline points="5,5 15,5 15,15 25,15"/>
  <path d="M10 10 L20 20 Z"/>
</svg>'''

STYLED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64" style="background-color: #ffffff">
  <rect id="box" class="card" width="10" height="10" x="0" y="0"
        style="fill:red;stroke-width:2;unknownprop:x;stroke:blue"
        transform="translate(10,20) rotate(45)"/>
</svg>'''

TEXT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" width="300" height="80">
  <text x="10" y="40" dx="2" textLength="120px" lengthAdjust="spacingAndGlyphs">Hello</text>
  <textpath xlink:href="#curve" startOffset="50%" method="stretch" spacing="auto">Along</textpath>
  <image width="32" height="32" x="4" y="4" xlink:href="icon.png"/>
</svg>'''

NESTED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">
  <marker id="arrow" markerWidth="10" markerHeight="10" refX="5" refY="5" orient="auto-start-reverse">
    <link href="https://example.com" target="_blank">
      <circle cx="5" cy="5" r="4"/>
    </link>
  </marker>
</svg>'''

UNSUPPORTED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24">
  <g><circle cx="1" cy="1" r="1"/></g>
  <!-- comment -->
  <circle cx="12" cy="12" r="10"/>
  <a href="#"><rect width="1" height="1"/></a>
</svg>'''


@pytest.fixture
def shapes_svg() -> str:
    return SHAPES_SVG


@pytest.fixture
def styled_svg() -> str:
    return STYLED_SVG


@pytest.fixture
def text_svg() -> str:
    return TEXT_SVG


@pytest.fixture
def nested_svg() -> str:
    return NESTED_SVG
