"""Serialize → resolve round trips: indices, defaults and content survive."""

from __future__ import annotations

import pytest

from tests.conftest import (
    BAR_CHART_SVG,
    CLIPPED_SVG,
    GRADIENT_SVG,
    PATTERN_SVG,
    RECT_SVG,
    SMILEY_SVG,
    TEXT_SVG,
    image_svg,
    png_data_uri,
)

from svgscene.engine.resolver import resolve, resolve_svg
from svgscene.models.nodes import ColorPaint, Group, LinearGradient, Path, Stroke, Svg
from svgscene.models.primitives import Color, LineTo, MoveTo, Rect, Size
from svgscene.models.scene_document import SceneDocument
from svgscene.svg.ids import AId, EId
from svgscene.svg.serializer import serialize, serialize_svg

SAMPLES = [RECT_SVG, SMILEY_SVG, BAR_CHART_SVG, GRADIENT_SVG, CLIPPED_SVG, PATTERN_SVG, TEXT_SVG]

# Samples in which every definition is linked from the resolved content.
FULLY_LINKED_SAMPLES = [RECT_SVG, SMILEY_SVG, BAR_CHART_SVG, GRADIENT_SVG, CLIPPED_SVG, TEXT_SVG]


def _roundtrip(doc: SceneDocument) -> SceneDocument:
    return resolve(serialize(doc))


@pytest.mark.parametrize("svg", SAMPLES)
def test_document_survives_roundtrip(svg):
    doc = resolve_svg(svg)
    again = _roundtrip(doc)
    assert again.to_dict() == doc.to_dict()


@pytest.mark.parametrize("svg", FULLY_LINKED_SAMPLES)
def test_document_survives_markup_roundtrip(svg):
    doc = resolve_svg(svg)
    again = resolve_svg(serialize_svg(doc))
    assert again.to_dict() == doc.to_dict()


def test_markup_roundtrip_recomputes_references():
    # The pattern's link to the gradient is not followed, so once written out
    # nothing links to the gradient any more.
    doc = resolve_svg(PATTERN_SVG)
    again = resolve_svg(serialize_svg(doc))
    assert len(doc.defs) == 2
    assert [n.id for n in again.defs] == ["pat1"]
    assert again.root[0].fill.paint.index == 0


def test_defs_index_stability():
    doc = resolve_svg(GRADIENT_SVG)
    again = _roundtrip(doc)
    assert [type(n) for n in again.defs] == [type(n) for n in doc.defs]
    assert [n.id for n in again.defs] == [n.id for n in doc.defs]


def test_unnamed_and_unreferenced_defs_keep_their_positions():
    doc = SceneDocument(Svg(size=Size(width=10, height=10), view_box=Rect(x=0, y=0, width=10, height=10)))
    doc.append_defs(LinearGradient(id=""))
    doc.append_defs(LinearGradient(id="used", x2=0.5))
    doc.append_node(1, Path(
        segments=[MoveTo(x=0, y=0), LineTo(x=5, y=5)],
        stroke=Stroke(paint={"kind": "link", "index": 1}),
    ))

    again = _roundtrip(doc)
    assert len(again.defs) == 2
    assert again.defs[1].x2 == 0.5
    assert again.root[0].stroke.paint.index == 1


def test_generated_id_matching_a_real_id_keeps_links_apart():
    doc = SceneDocument(Svg(size=Size(width=10, height=10), view_box=Rect(x=0, y=0, width=10, height=10)))
    doc.append_defs(LinearGradient(id=""))
    doc.append_defs(LinearGradient(id="defs0", x2=0.5))
    doc.append_node(1, Path(
        segments=[MoveTo(x=0, y=0), LineTo(x=5, y=5)],
        stroke=Stroke(paint={"kind": "link", "index": 1}),
    ))

    again = _roundtrip(doc)
    assert again.root[0].stroke.paint.index == 1
    assert again.defs[1].id == "defs0"
    assert again.defs[1].x2 == 0.5


def test_serialized_output_is_stable():
    first = serialize_svg(resolve_svg(GRADIENT_SVG))
    second = serialize_svg(resolve_svg(first))
    assert first == second


def test_defaults_never_written():
    doc = SceneDocument(Svg(size=Size(width=10, height=10), view_box=Rect(x=0, y=0, width=10, height=10)))
    doc.append_defs(LinearGradient(id="g"))
    doc.append_node(1, Group())
    doc.append_node(2, Path(
        segments=[MoveTo(x=0, y=0), LineTo(x=5, y=5)],
        stroke=Stroke(paint=ColorPaint(color=Color.black())),
    ))

    tree = serialize(doc)
    lg = next(tree.defs_element().elements())
    assert lg.attributes == {}
    group = [n for n in tree.root.elements() if n.tag == EId.G][0]
    assert group.attributes == {}
    path = next(group.elements())
    assert set(path.attributes) == {AId.D, AId.FILL, AId.STROKE}

    again = _roundtrip(doc)
    assert again.defs[0] == doc.defs[0]
    assert again.root[0].children[0].stroke == doc.root[0].children[0].stroke


def test_image_data_uri_roundtrip():
    doc = resolve_svg(image_svg(png_data_uri()))
    again = _roundtrip(doc)
    assert again.root[0].data == doc.root[0].data
    assert again.root[0].rect == doc.root[0].rect
