"""Tests for scene document → generic tree serialization."""

from __future__ import annotations

import base64

from svgscene import __version__
from svgscene.models.nodes import (
    ClipPath,
    ColorPaint,
    Fill,
    FillRule,
    Font,
    Group,
    Image,
    ImageKind,
    ImageRaw,
    LinearGradient,
    LinkPaint,
    Path,
    RadialGradient,
    Stop,
    Stroke,
    Svg,
    Text,
    TextAnchor,
    TextChunk,
    TextSpan,
)
from svgscene.models.primitives import Color, LineTo, MoveTo, Rect, Size, Transform
from svgscene.models.scene_document import SceneDocument
from svgscene.svg.ids import AId, EId, ValueId
from svgscene.svg.serializer import serialize, serialize_svg
from svgscene.svg.tree import FuncLink, TextNode

RED = Color(red=255, green=0, blue=0)


def _document() -> SceneDocument:
    return SceneDocument(Svg(size=Size(width=100, height=50), view_box=Rect(x=0, y=0, width=100, height=50)))


def _line(**kwargs) -> Path:
    return Path(segments=[MoveTo(x=0, y=0), LineTo(x=10, y=10)], **kwargs)


def test_root_attributes():
    tree = serialize(_document())
    svg = tree.svg_element()
    assert svg.get(AId.WIDTH) == 100
    assert svg.get(AId.HEIGHT) == 50
    assert svg.get(AId.VIEW_BOX) == Rect(x=0, y=0, width=100, height=50)
    assert svg.get(AId.SVGSCENE_VERSION) == __version__
    assert tree.defs_element() is not None


def test_gradient_defaults_are_omitted():
    doc = _document()
    doc.append_defs(LinearGradient(id="g1", base={"stops": [Stop()]}))

    lg = next(serialize(doc).defs_element().elements())
    assert lg.tag == EId.LINEAR_GRADIENT
    assert lg.id == "g1"
    assert lg.attributes == {}
    stop = next(lg.elements())
    assert stop.attributes == {}


def test_gradient_non_defaults_are_written():
    doc = _document()
    doc.append_defs(RadialGradient(
        id="g1",
        r=0.25,
        base={"units": "objectBoundingBox", "spread_method": "repeat", "transform": Transform.scale(2)},
    ))

    rg = next(serialize(doc).defs_element().elements())
    assert rg.get(AId.R) == 0.25
    assert not rg.has(AId.CX)
    assert rg.get(AId.GRADIENT_UNITS) is ValueId.OBJECT_BOUNDING_BOX
    assert rg.get(AId.SPREAD_METHOD) is ValueId.REPEAT
    assert rg.get(AId.GRADIENT_TRANSFORM) == Transform.scale(2)


def test_defs_without_id_get_generated_ids():
    doc = _document()
    doc.append_defs(LinearGradient(id=""))
    doc.append_defs(LinearGradient(id="named"))

    ids = [n.id for n in serialize(doc).defs_element().elements()]
    assert ids == ["defs0", "named"]


def test_generated_ids_never_clash_with_real_ones():
    doc = _document()
    doc.append_defs(LinearGradient(id=""))
    doc.append_defs(LinearGradient(id="defs0"))
    doc.append_defs(LinearGradient(id="defs0"))
    doc.append_node(1, _line(stroke=Stroke(paint=LinkPaint(index=1))))

    tree = serialize(doc)
    ids = [n.id for n in tree.defs_element().elements()]
    assert len(set(ids)) == 3
    assert ids[1] == "defs0"
    path = [n for n in tree.root.elements() if n.tag == EId.PATH][0]
    assert path.get(AId.STROKE) == FuncLink("defs0")


def test_paint_links_are_positional():
    doc = _document()
    doc.append_defs(LinearGradient(id="a"))
    doc.append_defs(LinearGradient(id="b"))
    doc.append_node(1, _line(fill=Fill(paint=LinkPaint(index=1)), stroke=Stroke(paint=LinkPaint(index=0))))

    path = [n for n in serialize(doc).root.elements() if n.tag == EId.PATH][0]
    assert path.get(AId.FILL) == FuncLink("b")
    assert path.get(AId.STROKE) == FuncLink("a")


def test_no_paint_is_written_as_none():
    doc = _document()
    doc.append_node(1, _line())

    path = [n for n in serialize(doc).root.elements() if n.tag == EId.PATH][0]
    assert path.get(AId.FILL) is ValueId.NONE
    assert path.get(AId.STROKE) is ValueId.NONE
    assert not path.has(AId.TRANSFORM)


def test_stroke_defaults_are_omitted():
    doc = _document()
    doc.append_node(1, _line(stroke=Stroke(paint=ColorPaint(color=RED), width=2, dasharray=[1.0, 2.0])))

    path = [n for n in serialize(doc).root.elements() if n.tag == EId.PATH][0]
    assert path.get(AId.STROKE) == RED
    assert path.get(AId.STROKE_WIDTH) == 2
    assert path.get(AId.STROKE_DASHARRAY) == [1.0, 2.0]
    for aid in (AId.STROKE_OPACITY, AId.STROKE_MITERLIMIT, AId.STROKE_LINECAP, AId.STROKE_LINEJOIN):
        assert not path.has(aid)


def test_near_default_values_are_omitted():
    doc = _document()
    doc.append_node(1, _line(
        fill=Fill(paint=ColorPaint(color=RED), opacity=1.0000001),
        stroke=Stroke(paint=ColorPaint(color=RED), width=1.0000001),
        transform=Transform(a=1.0000001, f=1e-7),
    ))

    path = [n for n in serialize(doc).root.elements() if n.tag == EId.PATH][0]
    assert set(path.attributes) == {AId.D, AId.FILL, AId.STROKE}


def test_transform_beyond_epsilon_is_written():
    doc = _document()
    doc.append_node(1, _line(transform=Transform(e=0.001)))

    path = [n for n in serialize(doc).root.elements() if n.tag == EId.PATH][0]
    assert path.get(AId.TRANSFORM) == Transform(e=0.001)


def test_clip_path_children_use_clip_rule():
    doc = _document()
    clip = ClipPath(id="c")
    clip.children.append(_line(fill=Fill(paint=ColorPaint(color=RED), rule=FillRule.EVEN_ODD)))
    doc.append_defs(clip)
    group = Group(clip_path=0)
    doc.append_node(1, group)
    doc.append_node(2, _line(fill=Fill(paint=ColorPaint(color=RED), rule=FillRule.EVEN_ODD)))

    tree = serialize(doc)
    clip_path = next(tree.defs_element().elements())
    clip_child = next(clip_path.elements())
    assert clip_child.get(AId.CLIP_RULE) is ValueId.EVENODD
    assert not clip_child.has(AId.FILL_RULE)

    g = [n for n in tree.root.elements() if n.tag == EId.G][0]
    assert g.get(AId.CLIP_PATH) == FuncLink("c")
    content_path = next(g.elements())
    assert content_path.get(AId.FILL_RULE) is ValueId.EVENODD


def test_group_opacity():
    doc = _document()
    doc.append_node(1, Group(id="half", opacity=0.5))
    doc.append_node(1, Group(id="full", opacity=1.0))

    groups = [n for n in serialize(doc).root.elements() if n.tag == EId.G]
    assert groups[0].get(AId.OPACITY) == 0.5
    assert not groups[1].has(AId.OPACITY)


def test_text_chunks_and_font():
    doc = _document()
    font = Font(family="Arial", size=16)
    doc.append_node(1, Text(chunks=[
        TextChunk(x=10, y=20, anchor=TextAnchor.MIDDLE, spans=[TextSpan(font=font, text="Hi")]),
        TextChunk(x=10, y=40, anchor=TextAnchor.START, spans=[TextSpan(font=font, text="there")]),
    ]))

    text = [n for n in serialize(doc).root.elements() if n.tag == EId.TEXT][0]
    assert text.get(AId.TEXT_ANCHOR) is ValueId.MIDDLE
    first, second = list(text.elements())
    assert first.get(AId.X) == 10
    assert not first.has(AId.TEXT_ANCHOR)
    # START differs from the inherited MIDDLE, so it must be explicit.
    assert second.get(AId.TEXT_ANCHOR) is ValueId.START

    span = next(first.elements())
    assert span.get(AId.FONT_FAMILY) == "Arial"
    assert span.get(AId.FONT_SIZE) == 16
    assert span.children == [TextNode("Hi")]


def test_embedded_image_is_wrapped_base64():
    payload = bytes(range(256))
    doc = _document()
    doc.append_node(1, Image(rect=Rect(width=20, height=10), data=ImageRaw(data=payload, format=ImageKind.PNG)))

    image = [n for n in serialize(doc).root.elements() if n.tag == EId.IMAGE][0]
    href = image.get(AId.XLINK_HREF)
    header, _, body = href.partition("\n")
    assert header == "data:image/png;base64,"
    lines = body.split("\n")
    assert all(len(line) <= 64 for line in lines)
    assert base64.b64decode("".join(lines)) == payload
    assert not image.has(AId.X)


def test_jpeg_image_uses_jpg_subtype():
    doc = _document()
    doc.append_node(1, Image(rect=Rect(width=1, height=1), data=ImageRaw(data=b"\xff\xd8\xff", format=ImageKind.JPEG)))

    image = [n for n in serialize(doc).root.elements() if n.tag == EId.IMAGE][0]
    assert image.get(AId.XLINK_HREF).startswith("data:image/jpg;base64,")


def test_serialize_does_not_modify_document():
    doc = _document()
    doc.append_defs(LinearGradient(id=""))
    serialize(doc)
    assert doc.defs[0].id == ""


def test_serialize_svg_text():
    doc = _document()
    doc.append_node(1, _line(fill=Fill(paint=ColorPaint(color=RED))))
    out = serialize_svg(doc)
    assert 'xmlns:xlink="http://www.w3.org/1999/xlink"' in out
    assert 'd="M 0 0 L 10 10"' in out
    assert 'fill="#ff0000"' in out
