"""Shared test fixtures."""

from __future__ import annotations

import base64
import io
import logging

import pytest
from PIL import Image as PILImage


# Sample SVGs, already preprocessed: no `use`, no CSS, inherited
# presentation attributes copied onto the elements that need them.

RECT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <rect x="10" y="10" width="80" height="80" fill="#4ECDC4"/>
</svg>'''

SMILEY_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <circle cx="12" cy="12" r="10" fill="none" stroke="#000000" stroke-width="2" stroke-linecap="round" stroke-linejoin="round"/>
  <circle cx="8" cy="9" r="1" fill="#000000"/>
  <circle cx="16" cy="9" r="1" fill="#000000"/>
  <path d="M8 14s1.5 2 4 2 4-2 4-2" fill="none" stroke="#000000" stroke-width="2" stroke-linecap="round"/>
</svg>'''

BAR_CHART_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="24" height="24" viewBox="0 0 24 24">
  <line x1="18" x2="18" y1="20" y2="10" stroke="#000000" stroke-width="2"/>
  <line x1="12" x2="12" y1="20" y2="4" stroke="#000000" stroke-width="2"/>
  <line x1="6" x2="6" y1="20" y2="14" stroke="#000000" stroke-width="2"/>
</svg>'''

GRADIENT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <defs>
    <linearGradient id="lg1" x2="0" y2="1" spreadMethod="reflect">
      <stop offset="0" stop-color="#ff0000"/>
      <stop offset="1" stop-color="#0000ff" stop-opacity="0.5"/>
    </linearGradient>
    <radialGradient id="rg1" gradientUnits="objectBoundingBox" r="0.4">
      <stop offset="0.25" stop-color="white"/>
    </radialGradient>
  </defs>
  <rect width="100" height="50" fill="url(#lg1)"/>
  <rect y="50" width="100" height="50" fill="url(#rg1)" stroke="url(#lg1)" stroke-width="3"/>
</svg>'''

CLIPPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <defs>
    <clipPath id="clip1">
      <circle cx="50" cy="50" r="40" fill="#000000" clip-rule="evenodd"/>
    </clipPath>
  </defs>
  <g clip-path="url(#clip1)" opacity="0.5">
    <rect width="100" height="100" fill="#ff0000"/>
  </g>
</svg>'''

BROKEN_CLIP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <g clip-path="url(#missing)">
    <path d="M 0 0 L 10 10" stroke="#000000"/>
  </g>
</svg>'''

PATTERN_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="0 0 100 100">
  <defs>
    <linearGradient id="lg1">
      <stop offset="0" stop-color="#ff0000"/>
    </linearGradient>
    <pattern id="pat1" width="10" height="10" patternUnits="userSpaceOnUse" patternContentUnits="objectBoundingBox">
      <rect width="5" height="5" fill="url(#lg1)"/>
      <rect x="5" y="5" width="5" height="5" fill="#00ff00"/>
    </pattern>
  </defs>
  <rect width="100" height="100" fill="url(#pat1)"/>
</svg>'''

TEXT_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <text x="10" y="20" font-family="Arial" font-size="16" fill="#000000" text-anchor="middle">Hello <tspan font-family="Arial" font-size="16" font-weight="bold" fill="#ff0000">bold</tspan><tspan x="10" y="40" font-family="Arial" font-size="16" fill="#0000ff">second line</tspan></text>
</svg>'''


def make_png(width: int = 2, height: int = 2) -> bytes:
    buf = io.BytesIO()
    PILImage.new("RGB", (width, height), (255, 0, 0)).save(buf, format="PNG")
    return buf.getvalue()


def image_svg(href: str) -> str:
    return (
        '<svg xmlns="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink" '
        'width="50" height="50" viewBox="0 0 50 50">'
        f'<image x="5" y="5" width="20" height="10" xlink:href="{href}"/>'
        "</svg>"
    )


def png_data_uri() -> str:
    return "data:image/png;base64," + base64.b64encode(make_png()).decode("ascii")


@pytest.fixture
def rect_svg() -> str:
    return RECT_SVG


@pytest.fixture
def gradient_svg() -> str:
    return GRADIENT_SVG


@pytest.fixture
def test_logger() -> logging.Logger:
    """Logger injected into conversions so caplog can capture diagnostics."""
    log = logging.getLogger("svgscene.tests")
    log.setLevel(logging.DEBUG)
    return log
