"""fill / stroke attributes → Fill / Stroke.

Absent paint and ``none`` both resolve to ``None`` ("no paint"); the scene
never falls back to an implicit black fill.
"""

from __future__ import annotations

from svgscene.engine.attributes import get_keyword, get_number_or
from svgscene.engine.context import ResolveContext, Scope
from svgscene.models.nodes import (
    ClipPath,
    ColorPaint,
    Fill,
    FillRule,
    LineCap,
    LineJoin,
    LinkPaint,
    Paint,
    Stroke,
)
from svgscene.models.primitives import Color
from svgscene.svg.ids import AId, ValueId
from svgscene.svg.tree import FuncLink, GenericNode
from svgscene.utils.math_helpers import clamp

_LINE_CAPS = {
    ValueId.BUTT: LineCap.BUTT,
    ValueId.ROUND: LineCap.ROUND,
    ValueId.SQUARE: LineCap.SQUARE,
}

_LINE_JOINS = {
    ValueId.MITER: LineJoin.MITER,
    ValueId.ROUND: LineJoin.ROUND,
    ValueId.BEVEL: LineJoin.BEVEL,
}


def convert_fill(node: GenericNode, ctx: ResolveContext, scope: Scope = Scope.DOCUMENT) -> Fill | None:
    paint = _convert_paint(node, AId.FILL, ctx, scope)
    if paint is None:
        return None

    rule_aid = AId.CLIP_RULE if scope is Scope.CLIP_PATH else AId.FILL_RULE
    rule = FillRule.EVEN_ODD if get_keyword(node, rule_aid) == ValueId.EVENODD else FillRule.NON_ZERO
    opacity = get_number_or(node, AId.FILL_OPACITY, 1.0, ctx.log)

    return Fill(paint=paint, opacity=clamp(opacity, 0.0, 1.0), rule=rule)


def convert_stroke(node: GenericNode, ctx: ResolveContext, scope: Scope = Scope.DOCUMENT) -> Stroke | None:
    paint = _convert_paint(node, AId.STROKE, ctx, scope)
    if paint is None:
        return None

    log = ctx.log
    width = get_number_or(node, AId.STROKE_WIDTH, 1.0, log)
    if width <= 0.0:
        log.debug("Stroke with a non-positive width on '%s' skipped.", node.tag)
        return None

    miterlimit = get_number_or(node, AId.STROKE_MITERLIMIT, 4.0, log)
    if miterlimit < 1.0:
        log.warning("Invalid stroke-miterlimit %s; using 1.", miterlimit)
        miterlimit = 1.0

    return Stroke(
        paint=paint,
        width=width,
        linecap=_LINE_CAPS.get(get_keyword(node, AId.STROKE_LINECAP), LineCap.BUTT),
        linejoin=_LINE_JOINS.get(get_keyword(node, AId.STROKE_LINEJOIN), LineJoin.MITER),
        miterlimit=miterlimit,
        dasharray=_convert_dasharray(node, ctx),
        dashoffset=get_number_or(node, AId.STROKE_DASHOFFSET, 0.0, log),
        opacity=clamp(get_number_or(node, AId.STROKE_OPACITY, 1.0, log), 0.0, 1.0),
    )


def _convert_paint(node: GenericNode, aid: AId, ctx: ResolveContext, scope: Scope) -> Paint | None:
    value = node.get(aid)
    if value is None or value == ValueId.NONE:
        return None
    if isinstance(value, Color):
        return ColorPaint(color=value)
    if isinstance(value, FuncLink):
        return _convert_link(value, aid, ctx, scope)
    ctx.log.warning("'%s' on '%s' must be already resolved.", aid, node.tag)
    return None


def _convert_link(link: FuncLink, aid: AId, ctx: ResolveContext, scope: Scope) -> Paint | None:
    if not scope.follows_links:
        ctx.log.warning("'%s' link to '%s' inside a definition is ignored.", aid, link.id)
        return None

    index = ctx.doc.defs_index(link.id)
    if index is None or isinstance(ctx.doc.defs_at(index), ClipPath):
        ctx.log.warning("'%s' references an invalid paint server '%s'.", aid, link.id)
        return None
    return LinkPaint(index=index)


def _convert_dasharray(node: GenericNode, ctx: ResolveContext) -> list[float] | None:
    value = node.get(AId.STROKE_DASHARRAY)
    if not isinstance(value, list) or not value:
        return None

    dashes = [float(v) for v in value]
    if any(v < 0 for v in dashes) or sum(dashes) <= 0:
        ctx.log.warning("Invalid stroke-dasharray %s ignored.", dashes)
        return None
    if len(dashes) % 2:
        dashes = dashes + dashes
    return dashes
