"""Generic attribute-bag SVG tree.

This is the loosely typed representation exchanged with the upstream parser:
every node is a tag id plus an ordered map of typed attribute values. Nothing
here knows about defaults or about the scene document.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union

from svgscene.models.primitives import Color, ClosePath, CurveTo, LineTo, MoveTo, Rect, Transform
from svgscene.svg.ids import AId, EId, ValueId


@dataclass(frozen=True)
class FuncLink:
    """``url(#id)`` reference, as used by ``fill``, ``stroke`` and ``clip-path``."""

    id: str

    def __str__(self) -> str:
        return f"url(#{self.id})"


@dataclass(frozen=True)
class Link:
    """``#id`` IRI reference, as used by ``xlink:href``."""

    id: str

    def __str__(self) -> str:
        return f"#{self.id}"


@dataclass(frozen=True)
class Length:
    """A length whose unit the preprocessor could not turn into user units."""

    number: float
    unit: str

    def __str__(self) -> str:
        return f"{self.number:g}{self.unit}"


AttributeValue = Union[
    float,
    str,
    Color,
    ValueId,
    Transform,
    Length,
    Rect,
    FuncLink,
    Link,
    list,  # number list, points or path segments
]

PathData = list[Union[MoveTo, LineTo, CurveTo, ClosePath]]


@dataclass
class TextNode:
    """Character data inside a text element."""

    text: str


@dataclass
class GenericNode:
    tag: EId
    id: str = ""
    attributes: dict[AId, AttributeValue] = field(default_factory=dict)
    children: list[GenericNode | TextNode] = field(default_factory=list)
    # Set by the preprocessor: some other node links to this node's id.
    is_referenced: bool = False

    def get(self, aid: AId) -> AttributeValue | None:
        return self.attributes.get(aid)

    def set(self, aid: AId, value: AttributeValue) -> None:
        self.attributes[aid] = value

    def has(self, aid: AId) -> bool:
        return aid in self.attributes

    def append(self, child: GenericNode | TextNode) -> GenericNode | TextNode:
        self.children.append(child)
        return child

    def elements(self) -> Iterator[GenericNode]:
        """Child elements, without character data."""
        for child in self.children:
            if isinstance(child, GenericNode):
                yield child

    def text_content(self) -> str:
        parts: list[str] = []
        for child in self.children:
            if isinstance(child, TextNode):
                parts.append(child.text)
            else:
                parts.append(child.text_content())
        return "".join(parts)

    def descendants(self) -> Iterator[GenericNode]:
        """This node and every element below it, in document order."""
        yield self
        for child in self.elements():
            yield from child.descendants()


@dataclass
class GenericDocument:
    root: GenericNode | None = None

    def svg_element(self) -> GenericNode | None:
        if self.root is not None and self.root.tag == EId.SVG:
            return self.root
        return None

    def defs_element(self) -> GenericNode | None:
        svg = self.svg_element()
        if svg is None:
            return None
        for child in svg.elements():
            if child.tag == EId.DEFS:
                return child
        return None

    def descendants(self) -> Iterator[GenericNode]:
        if self.root is not None:
            yield from self.root.descendants()

    def element_by_id(self, element_id: str) -> GenericNode | None:
        """First element in document order with this id."""
        if not element_id:
            return None
        for node in self.descendants():
            if node.id == element_id:
                return node
        return None

    def mark_references(self) -> None:
        """Recompute ``is_referenced`` for every node from the links in the document."""
        linked: set[str] = set()
        for node in self.descendants():
            for value in node.attributes.values():
                if isinstance(value, (FuncLink, Link)):
                    linked.add(value.id)
        for node in self.descendants():
            node.is_referenced = bool(node.id) and node.id in linked
