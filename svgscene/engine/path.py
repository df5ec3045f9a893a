"""Path data + presentation attributes → Path node."""

from __future__ import annotations

from svgscene.engine.attributes import get_transform
from svgscene.engine.context import ResolveContext, Scope
from svgscene.engine.paint import convert_fill, convert_stroke
from svgscene.models.nodes import Path
from svgscene.models.scene_document import ContentBuilder
from svgscene.svg.tree import GenericNode, PathData


def convert(
    node: GenericNode,
    segments: PathData,
    depth: int,
    builder: ContentBuilder,
    ctx: ResolveContext,
    scope: Scope = Scope.DOCUMENT,
) -> Path | None:
    # A lone MoveTo draws nothing.
    if len(segments) < 2:
        ctx.log.debug("Path '%s' has no drawable segments. Skipped.", node.id)
        return None

    path = Path(
        id=node.id,
        transform=get_transform(node),
        segments=list(segments),
        fill=convert_fill(node, ctx, scope),
        stroke=convert_stroke(node, ctx, scope),
    )
    builder.append(depth, path)
    return path
