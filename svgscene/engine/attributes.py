"""Typed attribute readers.

Each reader returns the typed value or ``None``; the caller applies the
documented default with ``or``/``if None``. Values of an unexpected type mean
the preprocessor left something unresolved, which is reported, not raised.
"""

from __future__ import annotations

import logging

from svgscene.models.nodes import SpreadMethod, Units
from svgscene.models.primitives import Color, Rect, Transform
from svgscene.svg.ids import AId, ValueId
from svgscene.svg.tree import GenericNode, Length

_UNITS = {
    ValueId.USER_SPACE_ON_USE: Units.USER_SPACE_ON_USE,
    ValueId.OBJECT_BOUNDING_BOX: Units.OBJECT_BOUNDING_BOX,
}

_SPREAD_METHODS = {
    ValueId.PAD: SpreadMethod.PAD,
    ValueId.REFLECT: SpreadMethod.REFLECT,
    ValueId.REPEAT: SpreadMethod.REPEAT,
}


def get_number(node: GenericNode, aid: AId, log: logging.Logger) -> float | None:
    value = node.get(aid)
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    if isinstance(value, Length):
        log.warning("'%s' on '%s' must be already resolved, got '%s'.", aid, node.tag, value)
    else:
        log.warning("'%s' on '%s' is not a number.", aid, node.tag)
    return None


def get_number_or(node: GenericNode, aid: AId, default: float, log: logging.Logger) -> float:
    value = get_number(node, aid, log)
    return default if value is None else value


def get_color(node: GenericNode, aid: AId) -> Color | None:
    value = node.get(aid)
    return value if isinstance(value, Color) else None


def get_transform(node: GenericNode, aid: AId = AId.TRANSFORM) -> Transform:
    value = node.get(aid)
    return value if isinstance(value, Transform) else Transform.identity()


def get_keyword(node: GenericNode, aid: AId) -> ValueId | None:
    value = node.get(aid)
    return value if isinstance(value, ValueId) else None


def get_view_box(node: GenericNode) -> Rect | None:
    value = node.get(AId.VIEW_BOX)
    return value if isinstance(value, Rect) else None


def get_string(node: GenericNode, aid: AId) -> str | None:
    value = node.get(aid)
    if isinstance(value, str) and not isinstance(value, ValueId):
        return value
    return None


def convert_units(node: GenericNode, aid: AId, log: logging.Logger) -> Units:
    value = node.get(aid)
    if value is None:
        return Units.USER_SPACE_ON_USE
    units = _UNITS.get(value) if isinstance(value, ValueId) else None
    if units is None:
        log.warning("'%s' must be already resolved.", aid)
        return Units.USER_SPACE_ON_USE
    return units


def convert_spread_method(node: GenericNode) -> SpreadMethod:
    value = get_keyword(node, AId.SPREAD_METHOD)
    return _SPREAD_METHODS.get(value, SpreadMethod.PAD)
