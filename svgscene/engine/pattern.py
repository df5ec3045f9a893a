"""pattern → definitions."""

from __future__ import annotations

from svgscene.engine.attributes import convert_units, get_number_or, get_transform, get_view_box
from svgscene.engine.content import convert_nodes
from svgscene.engine.context import ResolveContext, Scope
from svgscene.models.nodes import Pattern
from svgscene.models.primitives import Rect
from svgscene.models.scene_document import ContentBuilder
from svgscene.svg.ids import AId
from svgscene.svg.tree import GenericNode


def convert(node: GenericNode, ctx: ResolveContext) -> int | None:
    log = ctx.log
    rect = Rect(
        x=get_number_or(node, AId.X, 0.0, log),
        y=get_number_or(node, AId.Y, 0.0, log),
        width=get_number_or(node, AId.WIDTH, 0.0, log),
        height=get_number_or(node, AId.HEIGHT, 0.0, log),
    )
    if not rect.is_valid():
        log.warning("Pattern '%s' has an invalid size. Skipped.", node.id)
        return None

    view_box = get_view_box(node)
    if view_box is not None and not view_box.is_valid():
        log.warning("Pattern '%s' has an invalid viewBox; ignored.", node.id)
        view_box = None

    pattern = Pattern(
        id=node.id,
        rect=rect,
        view_box=view_box,
        units=convert_units(node, AId.PATTERN_UNITS, log),
        content_units=convert_units(node, AId.PATTERN_CONTENT_UNITS, log),
        transform=get_transform(node, AId.PATTERN_TRANSFORM),
    )
    convert_nodes(node, 1, ContentBuilder(pattern.children), ctx, Scope.PATTERN)
    return ctx.doc.append_defs(pattern)
