"""Tests for the scene document: defs indices and depth-based insertion."""

from __future__ import annotations

import pytest

from svgscene.models.nodes import ClipPath, Group, Image, ImageKind, ImageRaw, LinearGradient, Path, Svg
from svgscene.models.primitives import LineTo, MoveTo, Rect, Size
from svgscene.models.scene_document import ContentBuilder, SceneDocument


def _document() -> SceneDocument:
    return SceneDocument(Svg(size=Size(width=10, height=10), view_box=Rect(x=0, y=0, width=10, height=10)))


def _path(name: str = "") -> Path:
    return Path(id=name, segments=[MoveTo(x=0, y=0), LineTo(x=1, y=1)])


def test_defs_index_is_position():
    doc = _document()
    assert doc.append_defs(LinearGradient(id="a")) == 0
    assert doc.append_defs(ClipPath(id="b")) == 1
    assert doc.defs_index("b") == 1
    assert doc.defs_at(0).id == "a"
    assert doc.defs_index("missing") is None


def test_first_id_wins():
    doc = _document()
    doc.append_defs(LinearGradient(id="dup"))
    doc.append_defs(LinearGradient(id="dup"))
    assert doc.defs_index("dup") == 0
    assert len(doc.defs) == 2


def test_defs_without_id_are_not_indexed_by_id():
    doc = _document()
    doc.append_defs(LinearGradient(id=""))
    assert doc.defs_index("") is None


def test_depth_insertion():
    doc = _document()
    doc.append_node(1, Group(id="g1"))
    doc.append_node(2, _path("p1"))
    doc.append_node(2, Group(id="g2"))
    doc.append_node(3, _path("p2"))
    doc.append_node(1, _path("p3"))

    assert [n.id for n in doc.root] == ["g1", "p3"]
    g1 = doc.root[0]
    assert [n.id for n in g1.children] == ["p1", "g2"]
    assert [n.id for n in g1.children[1].children] == ["p2"]
    assert [(d, n.id) for d, n in doc.descendants()] == [
        (1, "g1"), (2, "p1"), (2, "g2"), (3, "p2"), (1, "p3"),
    ]
    assert doc.node_count() == 5


def test_depth_without_open_parent():
    doc = _document()
    with pytest.raises(ValueError):
        doc.append_node(2, _path())
    doc.append_node(1, _path())
    # Paths are leaves: nothing opens at depth 2.
    with pytest.raises(ValueError):
        doc.append_node(2, _path())


def test_builder_on_existing_list():
    children: list = []
    builder = ContentBuilder(children)
    builder.append(1, _path("a"))
    assert [n.id for n in children] == ["a"]


def test_to_dict_is_json_ready():
    doc = _document()
    doc.append_defs(LinearGradient(id="a"))
    doc.append_node(1, Image(rect=Rect(width=1, height=1), data=ImageRaw(data=b"\x89PNG", format=ImageKind.PNG)))

    data = doc.to_dict()
    assert data["svg"]["size"] == {"width": 10.0, "height": 10.0}
    assert data["defs"][0]["kind"] == "linear_gradient"
    assert data["defs"][0]["base"]["units"] == "userSpaceOnUse"
    image = data["root"][0]
    assert image["kind"] == "image"
    assert image["data"]["data"] == "iVBORw=="
    assert image["data"]["format"] == "png"
