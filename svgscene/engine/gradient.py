"""linearGradient / radialGradient → definitions."""

from __future__ import annotations

from svgscene.engine.attributes import (
    convert_spread_method,
    convert_units,
    get_color,
    get_number_or,
    get_transform,
)
from svgscene.engine.context import ResolveContext
from svgscene.models.nodes import BaseGradient, LinearGradient, RadialGradient, Stop
from svgscene.models.primitives import Color
from svgscene.svg.ids import AId, EId
from svgscene.svg.tree import GenericNode, Link
from svgscene.utils.math_helpers import clamp


def convert_linear(node: GenericNode, ctx: ResolveContext) -> int:
    log = ctx.log
    return ctx.doc.append_defs(LinearGradient(
        id=node.id,
        x1=get_number_or(node, AId.X1, 0.0, log),
        y1=get_number_or(node, AId.Y1, 0.0, log),
        x2=get_number_or(node, AId.X2, 1.0, log),
        y2=get_number_or(node, AId.Y2, 0.0, log),
        base=_convert_base(node, ctx),
    ))


def convert_radial(node: GenericNode, ctx: ResolveContext) -> int:
    log = ctx.log
    return ctx.doc.append_defs(RadialGradient(
        id=node.id,
        cx=get_number_or(node, AId.CX, 0.5, log),
        cy=get_number_or(node, AId.CY, 0.5, log),
        r=get_number_or(node, AId.R, 0.5, log),
        fx=get_number_or(node, AId.FX, 0.5, log),
        fy=get_number_or(node, AId.FY, 0.5, log),
        base=_convert_base(node, ctx),
    ))


def _convert_base(node: GenericNode, ctx: ResolveContext) -> BaseGradient:
    href = node.get(AId.XLINK_HREF)
    if isinstance(href, Link):
        # Attributes and stops inherited through href are the preprocessor's job.
        ctx.log.warning("Gradient '%s' references '%s'; the reference is ignored.", node.id, href.id)

    return BaseGradient(
        units=convert_units(node, AId.GRADIENT_UNITS, ctx.log),
        transform=get_transform(node, AId.GRADIENT_TRANSFORM),
        spread_method=convert_spread_method(node),
        stops=convert_stops(node, ctx),
    )


def convert_stops(node: GenericNode, ctx: ResolveContext) -> list[Stop]:
    stops: list[Stop] = []
    for child in node.elements():
        if child.tag != EId.STOP:
            ctx.log.debug("Invalid gradient child: '%s'.", child.tag)
            continue

        offset = get_number_or(child, AId.OFFSET, 0.0, ctx.log)
        color = get_color(child, AId.STOP_COLOR) or Color.black()
        opacity = get_number_or(child, AId.STOP_OPACITY, 1.0, ctx.log)

        stops.append(Stop(
            offset=clamp(offset, 0.0, 1.0),
            color=color,
            opacity=clamp(opacity, 0.0, 1.0),
        ))
    return stops
