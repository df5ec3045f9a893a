"""clipPath → definitions."""

from __future__ import annotations

from svgscene.engine.attributes import convert_units, get_transform
from svgscene.engine.content import convert_nodes
from svgscene.engine.context import ResolveContext, Scope
from svgscene.models.nodes import ClipPath
from svgscene.models.scene_document import ContentBuilder
from svgscene.svg.ids import AId
from svgscene.svg.tree import GenericNode


def convert(node: GenericNode, ctx: ResolveContext) -> int:
    clip = ClipPath(
        id=node.id,
        units=convert_units(node, AId.CLIP_PATH_UNITS, ctx.log),
        transform=get_transform(node),
    )
    convert_nodes(node, 1, ContentBuilder(clip.children), ctx, Scope.CLIP_PATH)
    return ctx.doc.append_defs(clip)
