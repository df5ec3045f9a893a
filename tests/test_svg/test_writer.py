"""Tests for SVG markup output."""

from __future__ import annotations

import pytest

from svgscene.models.primitives import Color, Rect
from svgscene.svg.ids import AId, EId
from svgscene.svg.parser import parse_svg
from svgscene.svg.tree import GenericDocument, GenericNode, TextNode
from svgscene.svg.writer import write_svg


def _svg_root() -> GenericNode:
    svg = GenericNode(tag=EId.SVG)
    svg.set(AId.XMLNS, "http://www.w3.org/2000/svg")
    svg.set(AId.WIDTH, 10.0)
    svg.set(AId.HEIGHT, 10.0)
    svg.set(AId.VIEW_BOX, Rect(x=0, y=0, width=10, height=10))
    return svg


def test_write_attributes_and_declaration():
    svg = _svg_root()
    rect = GenericNode(tag=EId.RECT, id="r1")
    rect.set(AId.WIDTH, 5.0)
    rect.set(AId.FILL, Color(red=255, green=0, blue=0))
    svg.append(rect)

    out = write_svg(GenericDocument(root=svg))
    assert out.startswith('<?xml version="1.0" encoding="UTF-8"?>\n<svg ')
    assert 'viewBox="0 0 10 10"' in out
    assert '<rect id="r1" width="5" fill="#ff0000" />' in out


def test_text_is_not_reindented():
    svg = _svg_root()
    text = GenericNode(tag=EId.TEXT)
    tspan = GenericNode(tag=EId.TSPAN)
    tspan.append(TextNode("a b"))
    text.append(tspan)
    svg.append(text)

    out = write_svg(GenericDocument(root=svg))
    assert "<text><tspan>a b</tspan></text>" in out


def test_output_parses_back():
    svg = _svg_root()
    svg.append(GenericNode(tag=EId.G))
    doc = parse_svg(write_svg(GenericDocument(root=svg)))
    assert doc.svg_element().get(AId.WIDTH) == 10.0
    assert [n.tag for n in doc.root.elements()] == [EId.G]


def test_empty_document():
    with pytest.raises(ValueError):
        write_svg(GenericDocument())
