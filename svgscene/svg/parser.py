"""SVG parser — preprocessed SVG markup → generic tree.

Stands in for the upstream parser: it expects markup whose styles, inheritance
and `use` elements were already flattened, and only types the attribute values.
Reference flags are computed the same way the preprocessor does.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable

from svgscene.diagnostics import diagnostics_logger
from svgscene.errors import SvgParseError
from svgscene.svg import values
from svgscene.svg.ids import AId, EId, ValueId
from svgscene.svg.tree import AttributeValue, GenericDocument, GenericNode, Length, TextNode

logger = logging.getLogger(__name__)

XLINK_NS = "http://www.w3.org/1999/xlink"

_LENGTH_ATTRS = {
    AId.WIDTH, AId.HEIGHT, AId.X, AId.Y, AId.X1, AId.Y1, AId.X2, AId.Y2,
    AId.CX, AId.CY, AId.R, AId.RX, AId.RY, AId.FX, AId.FY,
    AId.STROKE_WIDTH, AId.STROKE_DASHOFFSET, AId.FONT_SIZE,
}
_FRACTION_ATTRS = {
    AId.OFFSET, AId.OPACITY, AId.FILL_OPACITY, AId.STROKE_OPACITY, AId.STOP_OPACITY,
}
_KEYWORD_ATTRS = {
    AId.GRADIENT_UNITS, AId.PATTERN_UNITS, AId.PATTERN_CONTENT_UNITS, AId.CLIP_PATH_UNITS,
    AId.SPREAD_METHOD, AId.FILL_RULE, AId.CLIP_RULE, AId.STROKE_LINECAP, AId.STROKE_LINEJOIN,
    AId.TEXT_ANCHOR, AId.FONT_STYLE, AId.FONT_VARIANT, AId.FONT_WEIGHT, AId.FONT_STRETCH,
}
_TRANSFORM_ATTRS = {AId.TRANSFORM, AId.GRADIENT_TRANSFORM, AId.PATTERN_TRANSFORM}
_PAINT_ATTRS = {AId.FILL, AId.STROKE}


def parse_svg(svg_text: str, dpi: float = 96.0, log: logging.Logger | None = None) -> GenericDocument:
    """Parse preprocessed SVG markup into a GenericDocument.

    Malformed XML raises SvgParseError. Unknown elements and attributes, and
    attribute values that do not parse, are dropped with a diagnostic sent to
    `log` (the module logger when omitted).
    """
    log = diagnostics_logger(log, logger)
    try:
        root = ET.fromstring(svg_text)
    except ET.ParseError as e:
        raise SvgParseError(f"Malformed SVG: {e}") from e

    doc = GenericDocument(root=_convert_element(root, dpi, log))
    doc.mark_references()
    log.debug("Parsed SVG: %d elements", sum(1 for _ in doc.descendants()))
    return doc


def _strip_ns(name: str) -> tuple[str | None, str]:
    if name.startswith("{"):
        ns, _, local = name[1:].partition("}")
        return ns, local
    return None, name


def _convert_element(elem: ET.Element, dpi: float, log: logging.Logger) -> GenericNode | None:
    _, local = _strip_ns(elem.tag)
    try:
        tag = EId(local)
    except ValueError:
        log.warning("Unknown element '%s' skipped.", local)
        return None

    node = GenericNode(tag=tag, id=elem.get("id", ""))

    raw = _collect_attributes(elem)
    for name, text in raw.items():
        try:
            aid = AId(name)
        except ValueError:
            log.debug("Unknown attribute '%s' on '%s' ignored.", name, tag)
            continue
        if aid == AId.ID:
            continue
        try:
            node.set(aid, _parse_value(aid, tag, text, dpi, log))
        except ValueError as e:
            log.warning("Invalid '%s' on '%s' ignored: %s", name, tag, e)

    if elem.text:
        node.append(TextNode(elem.text))
    for child in elem:
        converted = _convert_element(child, dpi, log)
        if converted is not None:
            node.append(converted)
        if child.tail:
            node.append(TextNode(child.tail))

    if tag not in (EId.TEXT, EId.TSPAN, EId.TITLE, EId.DESC, EId.STYLE, EId.METADATA):
        # Only text content elements keep character data.
        node.children = [c for c in node.children if isinstance(c, GenericNode)]
    return node


def _collect_attributes(elem: ET.Element) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for name, text in elem.attrib.items():
        ns, local = _strip_ns(name)
        if ns == XLINK_NS or (ns is None and local == "href"):
            attrs[AId.XLINK_HREF.value] = text
        elif ns is None and local != "style":
            attrs[local] = text

    # Declarations in `style` win over presentation attributes.
    style = elem.get("style")
    if style:
        for decl in style.split(";"):
            name, sep, text = decl.partition(":")
            if sep and name.strip():
                attrs[name.strip()] = text.strip()
    return attrs


def _parse_fraction(text: str) -> float:
    text = text.strip()
    if text.endswith("%"):
        return values.parse_number(text[:-1]) / 100.0
    return values.parse_number(text)


def _parse_coordinate(text: str, dpi: float) -> float | Length:
    # Per-glyph coordinate lists are not supported; the first value wins.
    first = text.replace(",", " ").split()
    if not first:
        raise ValueError("empty coordinate")
    return values.parse_length(first[0], dpi)


def _parse_dasharray(text: str) -> list[float] | ValueId:
    if text.strip() == "none":
        return ValueId.NONE
    return values.parse_number_list(text)


_PARSERS: dict[AId, Callable[[str], AttributeValue]] = {
    AId.VIEW_BOX: values.parse_view_box,
    AId.POINTS: values.parse_points,
    AId.STOP_COLOR: values.parse_color,
    AId.CLIP_PATH: values.parse_func_link,
    AId.STROKE_DASHARRAY: _parse_dasharray,
    AId.STROKE_MITERLIMIT: values.parse_number,
    AId.XLINK_HREF: values.parse_link,
}


def _parse_value(aid: AId, tag: EId, text: str, dpi: float, log: logging.Logger) -> AttributeValue:
    if aid == AId.D:
        return values.parse_path_data(text, log)
    if aid in (AId.X, AId.Y) and tag in (EId.TEXT, EId.TSPAN):
        return _parse_coordinate(text, dpi)
    if aid in _LENGTH_ATTRS:
        return values.parse_length(text, dpi)
    if aid in _FRACTION_ATTRS:
        return _parse_fraction(text)
    if aid in _KEYWORD_ATTRS:
        return values.parse_keyword(text)
    if aid in _TRANSFORM_ATTRS:
        return values.parse_transform(text)
    if aid in _PAINT_ATTRS:
        return values.parse_paint(text)
    if aid == AId.CLIP_PATH and text.strip() == "none":
        return ValueId.NONE
    parser = _PARSERS.get(aid)
    if parser is not None:
        return parser(text)
    return text
