"""Basic shapes → path data.

rect, circle, ellipse, line, polyline and polygon become absolute M/L/C/Z
segments. Invalid geometry (e.g. a zero radius) yields None.
"""

from __future__ import annotations

import logging

from svgscene.engine.attributes import get_number_or
from svgscene.models.primitives import ClosePath, CurveTo, LineTo, MoveTo
from svgscene.svg.ids import AId, EId
from svgscene.svg.tree import GenericNode, PathData

# Control point distance for a quarter ellipse approximated by one cubic.
KAPPA = 0.5522847498307936


def convert(node: GenericNode, log: logging.Logger) -> PathData | None:
    if node.tag == EId.RECT:
        return _convert_rect(node, log)
    if node.tag == EId.CIRCLE:
        r = get_number_or(node, AId.R, 0.0, log)
        return _convert_ellipse(node, r, r, log)
    if node.tag == EId.ELLIPSE:
        rx = get_number_or(node, AId.RX, 0.0, log)
        ry = get_number_or(node, AId.RY, 0.0, log)
        return _convert_ellipse(node, rx, ry, log)
    if node.tag == EId.LINE:
        return _convert_line(node, log)
    if node.tag in (EId.POLYLINE, EId.POLYGON):
        return _convert_poly(node, node.tag == EId.POLYGON, log)
    log.warning("'%s' is not a shape.", node.tag)
    return None


def _convert_rect(node: GenericNode, log: logging.Logger) -> PathData | None:
    x = get_number_or(node, AId.X, 0.0, log)
    y = get_number_or(node, AId.Y, 0.0, log)
    w = get_number_or(node, AId.WIDTH, 0.0, log)
    h = get_number_or(node, AId.HEIGHT, 0.0, log)
    if w <= 0 or h <= 0:
        log.warning("Rect '%s' has an invalid size. Skipped.", node.id)
        return None

    # A missing radius takes the other one; both are clamped to half the side.
    rx = get_number_or(node, AId.RX, -1.0, log) if node.has(AId.RX) else None
    ry = get_number_or(node, AId.RY, -1.0, log) if node.has(AId.RY) else None
    if rx is None:
        rx = ry
    if ry is None:
        ry = rx
    rx = min(max(rx or 0.0, 0.0), w / 2)
    ry = min(max(ry or 0.0, 0.0), h / 2)

    if rx == 0 or ry == 0:
        return [
            MoveTo(x=x, y=y),
            LineTo(x=x + w, y=y),
            LineTo(x=x + w, y=y + h),
            LineTo(x=x, y=y + h),
            ClosePath(),
        ]

    kx = rx * KAPPA
    ky = ry * KAPPA
    right, bottom = x + w, y + h
    return [
        MoveTo(x=x + rx, y=y),
        LineTo(x=right - rx, y=y),
        CurveTo(x1=right - rx + kx, y1=y, x2=right, y2=y + ry - ky, x=right, y=y + ry),
        LineTo(x=right, y=bottom - ry),
        CurveTo(x1=right, y1=bottom - ry + ky, x2=right - rx + kx, y2=bottom, x=right - rx, y=bottom),
        LineTo(x=x + rx, y=bottom),
        CurveTo(x1=x + rx - kx, y1=bottom, x2=x, y2=bottom - ry + ky, x=x, y=bottom - ry),
        LineTo(x=x, y=y + ry),
        CurveTo(x1=x, y1=y + ry - ky, x2=x + rx - kx, y2=y, x=x + rx, y=y),
        ClosePath(),
    ]


def _convert_ellipse(node: GenericNode, rx: float, ry: float, log: logging.Logger) -> PathData | None:
    if rx <= 0 or ry <= 0:
        log.warning("'%s' '%s' has an invalid radius. Skipped.", node.tag, node.id)
        return None

    cx = get_number_or(node, AId.CX, 0.0, log)
    cy = get_number_or(node, AId.CY, 0.0, log)
    kx = rx * KAPPA
    ky = ry * KAPPA
    return [
        MoveTo(x=cx + rx, y=cy),
        CurveTo(x1=cx + rx, y1=cy + ky, x2=cx + kx, y2=cy + ry, x=cx, y=cy + ry),
        CurveTo(x1=cx - kx, y1=cy + ry, x2=cx - rx, y2=cy + ky, x=cx - rx, y=cy),
        CurveTo(x1=cx - rx, y1=cy - ky, x2=cx - kx, y2=cy - ry, x=cx, y=cy - ry),
        CurveTo(x1=cx + kx, y1=cy - ry, x2=cx + rx, y2=cy - ky, x=cx + rx, y=cy),
        ClosePath(),
    ]


def _convert_line(node: GenericNode, log: logging.Logger) -> PathData:
    return [
        MoveTo(x=get_number_or(node, AId.X1, 0.0, log), y=get_number_or(node, AId.Y1, 0.0, log)),
        LineTo(x=get_number_or(node, AId.X2, 0.0, log), y=get_number_or(node, AId.Y2, 0.0, log)),
    ]


def _convert_poly(node: GenericNode, closed: bool, log: logging.Logger) -> PathData | None:
    points = node.get(AId.POINTS)
    if not isinstance(points, list) or len(points) < 2:
        log.warning("'%s' '%s' has less than 2 points. Skipped.", node.tag, node.id)
        return None

    (x0, y0), *rest = points
    segments: PathData = [MoveTo(x=x0, y=y0)]
    segments.extend(LineTo(x=x, y=y) for x, y in rest)
    if closed:
        segments.append(ClosePath())
    return segments
