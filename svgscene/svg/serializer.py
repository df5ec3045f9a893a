"""Inverse serializer — scene document → generic tree (and SVG markup).

Used for debugging dumps and round-trip checks, never on the render path.
Attributes equal to the resolver's defaults are omitted, so resolving the
output again reproduces the same document. Definitions are written in index
order, which keeps every positional ``LinkPaint`` / ``clip_path`` valid.
"""

from __future__ import annotations

import base64
import logging

from svgscene import __version__
from svgscene.config import settings
from svgscene.diagnostics import diagnostics_logger
from svgscene.models.nodes import (
    BaseGradient,
    ClipPath,
    ColorPaint,
    ContentNode,
    Fill,
    FillRule,
    Font,
    FontStretch,
    FontStyle,
    FontVariant,
    FontWeight,
    Group,
    Image,
    ImageKind,
    ImagePath,
    LineCap,
    LineJoin,
    LinearGradient,
    Paint,
    Path,
    Pattern,
    RadialGradient,
    SpreadMethod,
    Stroke,
    Text,
    TextAnchor,
    Units,
)
from svgscene.models.primitives import Color, Transform
from svgscene.models.scene_document import SceneDocument
from svgscene.svg.ids import AId, EId, ValueId
from svgscene.svg.tree import FuncLink, GenericDocument, GenericNode, TextNode
from svgscene.svg.writer import write_svg
from svgscene.utils.math_helpers import fuzzy_ne

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"
SVGSCENE_NS = "https://github.com/svgscene/svgscene"

_MIME_SUBTYPES = {ImageKind.PNG: "png", ImageKind.JPEG: "jpg"}


class _Serializer:
    def __init__(self, log: logging.Logger) -> None:
        self.log = log
        self.defs = GenericNode(tag=EId.DEFS)

    # --- Definitions ---

    def conv_defs(self, doc: SceneDocument) -> None:
        taken = _scene_ids(doc)
        emitted: set[str] = set()
        for index, n in enumerate(doc.defs):
            elem: GenericNode
            if isinstance(n, LinearGradient):
                elem = GenericNode(tag=EId.LINEAR_GRADIENT)
                _set_number(elem, AId.X1, n.x1, 0.0)
                _set_number(elem, AId.Y1, n.y1, 0.0)
                _set_number(elem, AId.X2, n.x2, 1.0)
                _set_number(elem, AId.Y2, n.y2, 0.0)
                self.conv_base_grad(n.base, elem)
            elif isinstance(n, RadialGradient):
                elem = GenericNode(tag=EId.RADIAL_GRADIENT)
                _set_number(elem, AId.CX, n.cx, 0.5)
                _set_number(elem, AId.CY, n.cy, 0.5)
                _set_number(elem, AId.R, n.r, 0.5)
                _set_number(elem, AId.FX, n.fx, 0.5)
                _set_number(elem, AId.FY, n.fy, 0.5)
                self.conv_base_grad(n.base, elem)
            elif isinstance(n, ClipPath):
                elem = GenericNode(tag=EId.CLIP_PATH)
                _set_units(elem, AId.CLIP_PATH_UNITS, n.units)
                _set_transform(elem, AId.TRANSFORM, n.transform)
                self.conv_elements(n.children, elem, in_clip=True)
            else:
                elem = self.conv_pattern(n)

            # Every definition is kept, referenced or not, so indices survive.
            elem.id = _defs_id(n.id, index, taken, emitted)
            emitted.add(elem.id)
            elem.is_referenced = True
            self.defs.append(elem)

    def conv_pattern(self, pattern: Pattern) -> GenericNode:
        elem = GenericNode(tag=EId.PATTERN)
        _set_number(elem, AId.X, pattern.rect.x, 0.0)
        _set_number(elem, AId.Y, pattern.rect.y, 0.0)
        elem.set(AId.WIDTH, pattern.rect.width)
        elem.set(AId.HEIGHT, pattern.rect.height)
        if pattern.view_box is not None:
            elem.set(AId.VIEW_BOX, pattern.view_box)
        _set_units(elem, AId.PATTERN_UNITS, pattern.units)
        _set_units(elem, AId.PATTERN_CONTENT_UNITS, pattern.content_units)
        _set_transform(elem, AId.PATTERN_TRANSFORM, pattern.transform)
        self.conv_elements(pattern.children, elem)
        return elem

    def conv_base_grad(self, g: BaseGradient, elem: GenericNode) -> None:
        _set_units(elem, AId.GRADIENT_UNITS, g.units)
        if g.spread_method != SpreadMethod.PAD:
            elem.set(AId.SPREAD_METHOD, ValueId(g.spread_method.value))
        _set_transform(elem, AId.GRADIENT_TRANSFORM, g.transform)

        for s in g.stops:
            stop = GenericNode(tag=EId.STOP)
            _set_number(stop, AId.OFFSET, s.offset, 0.0)
            if s.color != Color.black():
                stop.set(AId.STOP_COLOR, s.color)
            _set_number(stop, AId.STOP_OPACITY, s.opacity, 1.0)
            elem.append(stop)

    # --- Content ---

    def conv_elements(self, nodes: list[ContentNode], parent: GenericNode, in_clip: bool = False) -> None:
        for n in nodes:
            if isinstance(n, Path):
                elem = _new_element(EId.PATH, n.id, n.transform)
                elem.set(AId.D, list(n.segments))
                self.conv_fill(n.fill, elem, in_clip)
                self.conv_stroke(n.stroke, elem)
            elif isinstance(n, Text):
                elem = _new_element(EId.TEXT, n.id, n.transform)
                self.conv_text(n, elem, in_clip)
            elif isinstance(n, Image):
                elem = _new_element(EId.IMAGE, n.id, n.transform)
                self.conv_image(n, elem)
            elif isinstance(n, Group):
                elem = _new_element(EId.G, n.id, n.transform)
                if n.clip_path is not None:
                    link = self.link_to(n.clip_path)
                    if link is not None:
                        elem.set(AId.CLIP_PATH, link)
                if n.opacity is not None and fuzzy_ne(n.opacity, 1.0):
                    elem.set(AId.OPACITY, n.opacity)
                self.conv_elements(n.children, elem, in_clip)
            else:
                self.log.warning("Unknown content node %r skipped.", type(n).__name__)
                continue
            parent.append(elem)

    def conv_text(self, text: Text, elem: GenericNode, in_clip: bool) -> None:
        # A chunk without its own anchor inherits the previous one; the first
        # chunk inherits from the text element.
        inherited = TextAnchor.START
        for i, chunk in enumerate(text.chunks):
            chunk_elem = GenericNode(tag=EId.TSPAN)
            if chunk.x is not None:
                chunk_elem.set(AId.X, chunk.x)
            if chunk.y is not None:
                chunk_elem.set(AId.Y, chunk.y)
            if chunk.anchor != inherited:
                anchor_elem = elem if i == 0 else chunk_elem
                anchor_elem.set(AId.TEXT_ANCHOR, ValueId(chunk.anchor.value))
            inherited = chunk.anchor
            elem.append(chunk_elem)

            for span in chunk.spans:
                span_elem = GenericNode(tag=EId.TSPAN)
                self.conv_fill(span.fill, span_elem, in_clip)
                self.conv_stroke(span.stroke, span_elem)
                _conv_font(span.font, span_elem)
                span_elem.append(TextNode(span.text))
                chunk_elem.append(span_elem)

    def conv_image(self, img: Image, elem: GenericNode) -> None:
        _set_number(elem, AId.X, img.rect.x, 0.0)
        _set_number(elem, AId.Y, img.rect.y, 0.0)
        elem.set(AId.WIDTH, img.rect.width)
        elem.set(AId.HEIGHT, img.rect.height)

        if img.data is None:
            return
        if isinstance(img.data, ImagePath):
            href = img.data.path
        else:
            encoded = base64.b64encode(img.data.data).decode("ascii")
            width = settings.base64_line_width
            lines = [encoded[i:i + width] for i in range(0, len(encoded), width)]
            href = f"data:image/{_MIME_SUBTYPES[img.data.format]};base64,\n" + "\n".join(lines)
        elem.set(AId.XLINK_HREF, href)

    def conv_fill(self, fill: Fill | None, elem: GenericNode, in_clip: bool) -> None:
        if fill is None:
            elem.set(AId.FILL, ValueId.NONE)
            return

        paint = self.conv_paint(fill.paint)
        elem.set(AId.FILL, ValueId.NONE if paint is None else paint)
        _set_number(elem, AId.FILL_OPACITY, fill.opacity, 1.0)
        if fill.rule != FillRule.NON_ZERO:
            elem.set(AId.CLIP_RULE if in_clip else AId.FILL_RULE, ValueId.EVENODD)

    def conv_stroke(self, stroke: Stroke | None, elem: GenericNode) -> None:
        if stroke is None:
            elem.set(AId.STROKE, ValueId.NONE)
            return

        paint = self.conv_paint(stroke.paint)
        elem.set(AId.STROKE, ValueId.NONE if paint is None else paint)
        _set_number(elem, AId.STROKE_OPACITY, stroke.opacity, 1.0)
        _set_number(elem, AId.STROKE_DASHOFFSET, stroke.dashoffset, 0.0)
        _set_number(elem, AId.STROKE_MITERLIMIT, stroke.miterlimit, 4.0)
        _set_number(elem, AId.STROKE_WIDTH, stroke.width, 1.0)
        if stroke.linecap != LineCap.BUTT:
            elem.set(AId.STROKE_LINECAP, ValueId(stroke.linecap.value))
        if stroke.linejoin != LineJoin.MITER:
            elem.set(AId.STROKE_LINEJOIN, ValueId(stroke.linejoin.value))
        if stroke.dasharray:
            elem.set(AId.STROKE_DASHARRAY, list(stroke.dasharray))

    def conv_paint(self, paint: Paint) -> Color | FuncLink | None:
        if isinstance(paint, ColorPaint):
            return paint.color
        return self.link_to(paint.index)

    def link_to(self, index: int) -> FuncLink | None:
        """Reference the index-th definition emitted so far."""
        children = list(self.defs.elements())
        if index >= len(children):
            self.log.warning("Link to definition #%d points past the definitions list.", index)
            return None
        return FuncLink(children[index].id)


def _scene_ids(doc: SceneDocument) -> set[str]:
    ids: set[str] = set()
    stack: list = [*doc.defs, *doc.root]
    while stack:
        n = stack.pop()
        if n.id:
            ids.add(n.id)
        stack.extend(getattr(n, "children", ()))
    return ids


def _defs_id(node_id: str, index: int, taken: set[str], emitted: set[str]) -> str:
    """An id naming exactly one definition, so each link resolves to its own index."""
    if node_id and node_id not in emitted:
        return node_id
    base = candidate = f"defs{index}"
    suffix = 1
    while candidate in taken or candidate in emitted:
        candidate = f"{base}_{suffix}"
        suffix += 1
    return candidate


def serialize(doc: SceneDocument, log: logging.Logger | None = None) -> GenericDocument:
    """Rebuild a generic tree from a finalized SceneDocument. The document is not modified."""
    s = _Serializer(diagnostics_logger(log, logger))

    svg = GenericNode(tag=EId.SVG)
    svg.set(AId.XMLNS, SVG_NS)
    svg.set(AId.WIDTH, doc.svg.size.width)
    svg.set(AId.HEIGHT, doc.svg.size.height)
    svg.set(AId.VIEW_BOX, doc.svg.view_box)
    svg.set(AId.XMLNS_XLINK, XLINK_NS)
    svg.set(AId.XMLNS_SVGSCENE, SVGSCENE_NS)
    svg.set(AId.SVGSCENE_VERSION, __version__)
    svg.append(s.defs)

    s.conv_defs(doc)
    s.conv_elements(list(doc.root), svg)
    return GenericDocument(root=svg)


def serialize_svg(doc: SceneDocument, log: logging.Logger | None = None) -> str:
    """SceneDocument → SVG markup."""
    return write_svg(serialize(doc, log))


def _new_element(tag: EId, element_id: str, ts: Transform) -> GenericNode:
    elem = GenericNode(tag=tag, id=element_id)
    _set_transform(elem, AId.TRANSFORM, ts)
    return elem


def _set_number(elem: GenericNode, aid: AId, value: float, default: float) -> None:
    if fuzzy_ne(value, default):
        elem.set(aid, value)


def _set_units(elem: GenericNode, aid: AId, units: Units) -> None:
    if units != Units.USER_SPACE_ON_USE:
        elem.set(aid, ValueId(units.value))


def _set_transform(elem: GenericNode, aid: AId, ts: Transform) -> None:
    if not ts.is_default():
        elem.set(aid, ts)


def _conv_font(font: Font, elem: GenericNode) -> None:
    elem.set(AId.FONT_FAMILY, font.family)
    elem.set(AId.FONT_SIZE, font.size)
    if font.style != FontStyle.NORMAL:
        elem.set(AId.FONT_STYLE, ValueId(font.style.value))
    if font.variant != FontVariant.NORMAL:
        elem.set(AId.FONT_VARIANT, ValueId(font.variant.value))
    if font.weight != FontWeight.NORMAL:
        elem.set(AId.FONT_WEIGHT, ValueId(font.weight.value))
    if font.stretch != FontStretch.NORMAL:
        elem.set(AId.FONT_STRETCH, ValueId(font.stretch.value))
