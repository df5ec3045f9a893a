"""Content pass — walks generic elements and appends scene nodes by depth.

The same routine converts the document body and the children of clip paths and
patterns; ``scope`` tells it whether links may be followed.
"""

from __future__ import annotations

from svgscene.engine import image, path, shapes, text
from svgscene.engine.attributes import get_number, get_transform
from svgscene.engine.context import ResolveContext, Scope
from svgscene.models.nodes import ClipPath, Group
from svgscene.models.scene_document import ContentBuilder
from svgscene.svg.ids import SHAPE_ELEMENTS, SKIPPED_ELEMENTS, AId, EId, ValueId
from svgscene.svg.tree import FuncLink, GenericNode
from svgscene.utils.math_helpers import clamp, fuzzy_eq

# Group was dropped together with its subtree.
_DROP = object()


def convert_nodes(
    parent: GenericNode,
    depth: int,
    builder: ContentBuilder,
    ctx: ResolveContext,
    scope: Scope = Scope.DOCUMENT,
) -> None:
    for node in parent.elements():
        # Referenced elements live in the definitions list, never in the content tree.
        if node.is_referenced:
            continue

        tag = node.tag
        if tag in SKIPPED_ELEMENTS:
            continue
        if tag == EId.G:
            _convert_group(node, depth, builder, ctx, scope)
        elif tag in SHAPE_ELEMENTS:
            segments = shapes.convert(node, ctx.log)
            if segments is not None:
                path.convert(node, segments, depth, builder, ctx, scope)
        elif tag == EId.PATH:
            segments = node.get(AId.D)
            if isinstance(segments, list):
                path.convert(node, segments, depth, builder, ctx, scope)
        elif tag == EId.TEXT:
            text.convert(node, depth, builder, ctx, scope)
        elif tag == EId.IMAGE:
            image.convert(node, depth, builder, ctx)
        elif tag in (EId.USE, EId.SWITCH):
            ctx.log.warning("'%s' must be resolved.", tag)
        elif tag == EId.SVG:
            ctx.log.warning("Nested 'svg' unsupported.")
        else:
            ctx.log.warning("Unsupported element '%s'.", tag)


def _convert_group(
    node: GenericNode,
    depth: int,
    builder: ContentBuilder,
    ctx: ResolveContext,
    scope: Scope,
) -> None:
    clip_path = _resolve_clip_path(node, ctx, scope)
    if clip_path is _DROP:
        return

    opacity = get_number(node, AId.OPACITY, ctx.log)
    if opacity is not None:
        opacity = clamp(opacity, 0.0, 1.0)
        # Fully opaque and unset are the same state.
        if fuzzy_eq(opacity, 1.0):
            opacity = None
    group = Group(
        id=node.id,
        transform=get_transform(node),
        opacity=opacity,
        clip_path=clip_path,
    )
    builder.append(depth, group)
    convert_nodes(node, depth + 1, builder, ctx, scope)


def _resolve_clip_path(node: GenericNode, ctx: ResolveContext, scope: Scope):
    """Return the defs index of the group's clip path, None, or _DROP."""
    value = node.get(AId.CLIP_PATH)
    if value is None or value == ValueId.NONE:
        return None

    if not scope.follows_links:
        ctx.log.warning("'clip-path' on group '%s' inside a definition is ignored.", node.id)
        return None

    if isinstance(value, FuncLink):
        target = ctx.element_by_id(value.id)
        if target is not None and target.tag == EId.CLIP_PATH:
            index = ctx.doc.defs_index(value.id)
            if index is not None and isinstance(ctx.doc.defs_at(index), ClipPath):
                return index

    # Elements linked to an invalid clip path are not rendered, and only groups
    # carry clip paths, so the whole group goes.
    ctx.log.info("Group '%s' references an invalid clip path. Skipped.", node.id)
    return _DROP
