"""Forward resolver — generic tree → scene document.

Two passes over the tree: the referenced children of ``defs`` are converted
into the definitions list first, so that the content pass can turn every
``url(#id)`` into a stable positional index.
"""

from __future__ import annotations

import logging
import math
import time

from svgscene.diagnostics import diagnostics_logger
from svgscene.engine import clippath, gradient, pattern
from svgscene.engine.attributes import get_number, get_view_box
from svgscene.engine.content import convert_nodes
from svgscene.engine.context import ResolveContext
from svgscene.engine.options import ResolveOptions
from svgscene.errors import ConversionError, ErrorKind
from svgscene.models.nodes import Svg
from svgscene.models.primitives import Rect, Size
from svgscene.models.scene_document import ROOT_DEPTH, SceneDocument
from svgscene.svg.ids import AId, EId
from svgscene.svg.parser import parse_svg
from svgscene.svg.tree import GenericDocument, GenericNode

logger = logging.getLogger(__name__)


def resolve(
    tree: GenericDocument,
    options: ResolveOptions | None = None,
    log: logging.Logger | None = None,
) -> SceneDocument:
    """Resolve a preprocessed generic tree into a SceneDocument.

    Raises ConversionError when the root element, its size or its viewBox is
    missing. Any other problem drops the offending element and is logged.
    """
    options = options or ResolveOptions()
    log = diagnostics_logger(log, logger)
    start = time.perf_counter()

    svg = tree.svg_element()
    if svg is None:
        # Only reachable with a tree that did not go through the preprocessor.
        raise ConversionError(ErrorKind.MISSING_SVG_NODE)

    doc = SceneDocument(Svg(
        size=_get_img_size(svg, log),
        view_box=_get_view_box(svg),
        dpi=options.dpi,
    ))
    ctx = ResolveContext(tree=tree, doc=doc, options=options, log=log)

    _convert_ref_nodes(tree, ctx)
    convert_nodes(svg, ROOT_DEPTH + 1, doc.content, ctx)

    log.debug(
        "Resolved SVG: %d defs, %d nodes in %.1fms",
        len(doc.defs),
        doc.node_count(),
        (time.perf_counter() - start) * 1000,
    )
    return doc


def resolve_svg(
    svg_text: str,
    options: ResolveOptions | None = None,
    log: logging.Logger | None = None,
) -> SceneDocument:
    """Parse preprocessed SVG markup and resolve it."""
    options = options or ResolveOptions()
    return resolve(parse_svg(svg_text, dpi=options.dpi, log=log), options, log)


def _convert_ref_nodes(tree: GenericDocument, ctx: ResolveContext) -> None:
    defs = tree.defs_element()
    if defs is None:
        return

    for node in defs.elements():
        # `defs` may hold anything, but only referenced elements are needed.
        if not node.is_referenced:
            continue

        if node.tag == EId.LINEAR_GRADIENT:
            gradient.convert_linear(node, ctx)
        elif node.tag == EId.RADIAL_GRADIENT:
            gradient.convert_radial(node, ctx)
        elif node.tag == EId.CLIP_PATH:
            clippath.convert(node, ctx)
        elif node.tag == EId.PATTERN:
            pattern.convert(node, ctx)
        else:
            ctx.log.warning("Unsupported element '%s'.", node.tag)


def _get_img_size(svg: GenericNode, log: logging.Logger) -> Size:
    w = get_number(svg, AId.WIDTH, log)
    h = get_number(svg, AId.HEIGHT, log)
    if w is None or h is None or w <= 0 or h <= 0 or not (math.isfinite(w) and math.isfinite(h)):
        raise ConversionError(ErrorKind.INVALID_SIZE)
    return Size(width=round(w), height=round(h))


def _get_view_box(svg: GenericNode) -> Rect:
    vbox = get_view_box(svg)
    if vbox is None or not vbox.is_valid():
        raise ConversionError(ErrorKind.INVALID_VIEW_BOX)
    return vbox.rounded()
