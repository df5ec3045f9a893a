"""Resolved scene document — definitions list plus depth-ordered content tree."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from svgscene.models.nodes import CONTAINER_KINDS, ContentNode, DefsNode, Svg

# Depth of the implicit root; top-level content is inserted at ROOT_DEPTH + 1.
ROOT_DEPTH = 0


class ContentBuilder:
    """Attaches nodes by nesting depth.

    A node inserted at depth N becomes the last child of the most recently
    inserted container at depth N - 1 (depth 0 is the builder's own list).
    """

    def __init__(self, children: list[ContentNode] | None = None) -> None:
        self.children: list[ContentNode] = children if children is not None else []
        self._open: list[list[ContentNode]] = [self.children]

    def append(self, depth: int, node: ContentNode) -> ContentNode:
        if depth < 1 or depth > len(self._open):
            raise ValueError(f"no open parent for depth {depth} (deepest open level is {len(self._open) - 1})")
        del self._open[depth:]
        self._open[depth - 1].append(node)
        if isinstance(node, CONTAINER_KINDS):
            self._open.append(node.children)
        return node


class SceneDocument:
    """Owned output of the resolver.

    Built once, append-only, then read by the renderer and the serializer.
    Definitions are addressed by their position (the defs index), which never
    changes once assigned.
    """

    def __init__(self, svg: Svg) -> None:
        self._svg = svg
        self._defs: list[DefsNode] = []
        self._defs_ids: dict[str, int] = {}
        self._content = ContentBuilder()

    @property
    def svg(self) -> Svg:
        return self._svg

    # --- Definitions ---

    @property
    def defs(self) -> tuple[DefsNode, ...]:
        return tuple(self._defs)

    def append_defs(self, node: DefsNode) -> int:
        index = len(self._defs)
        self._defs.append(node)
        if node.id and node.id not in self._defs_ids:
            self._defs_ids[node.id] = index
        return index

    def defs_at(self, index: int) -> DefsNode:
        return self._defs[index]

    def defs_index(self, element_id: str) -> int | None:
        return self._defs_ids.get(element_id)

    # --- Content ---

    @property
    def root(self) -> tuple[ContentNode, ...]:
        return tuple(self._content.children)

    @property
    def content(self) -> ContentBuilder:
        """Builder for the top-level content tree; only the resolver writes to it."""
        return self._content

    def append_node(self, depth: int, node: ContentNode) -> ContentNode:
        return self._content.append(depth, node)

    def descendants(self) -> Iterator[tuple[int, ContentNode]]:
        """Yield ``(depth, node)`` for every content node in document order."""
        yield from _walk(self._content.children, 1)

    def node_count(self) -> int:
        return sum(1 for _ in self.descendants())

    def to_dict(self) -> dict[str, Any]:
        return {
            "svg": self._svg.model_dump(mode="json"),
            "defs": [n.model_dump(mode="json") for n in self._defs],
            "root": [n.model_dump(mode="json") for n in self._content.children],
        }


def _walk(nodes: list[ContentNode], depth: int) -> Iterator[tuple[int, ContentNode]]:
    for node in nodes:
        yield depth, node
        if isinstance(node, CONTAINER_KINDS):
            yield from _walk(node.children, depth + 1)
