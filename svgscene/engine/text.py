"""text → Text node with chunks of styled spans.

A chunk is a run of spans sharing one start position. The text element opens
the first chunk; a ``tspan`` carrying ``x`` or ``y`` opens a new one. Each piece
of character data becomes a span styled by its nearest element, whose
attributes the preprocessor has already flattened.
"""

from __future__ import annotations

from svgscene.engine.attributes import get_keyword, get_number, get_string, get_transform
from svgscene.engine.context import ResolveContext, Scope
from svgscene.engine.paint import convert_fill, convert_stroke
from svgscene.models.nodes import (
    Font,
    FontStretch,
    FontStyle,
    FontVariant,
    FontWeight,
    Text,
    TextAnchor,
    TextChunk,
    TextSpan,
)
from svgscene.models.scene_document import ContentBuilder
from svgscene.svg.ids import AId, EId, ValueId
from svgscene.svg.tree import GenericNode, TextNode


def convert(
    node: GenericNode,
    depth: int,
    builder: ContentBuilder,
    ctx: ResolveContext,
    scope: Scope = Scope.DOCUMENT,
) -> Text | None:
    chunks: list[TextChunk] = [_new_chunk(node, ctx)]
    _collect(node, chunks, ctx, scope)

    chunks = [c for c in chunks if c.spans]
    if not chunks:
        ctx.log.debug("Text '%s' has no content. Skipped.", node.id)
        return None

    text = Text(id=node.id, transform=get_transform(node), chunks=chunks)
    builder.append(depth, text)
    return text


def _collect(parent: GenericNode, chunks: list[TextChunk], ctx: ResolveContext, scope: Scope) -> None:
    for child in parent.children:
        if isinstance(child, TextNode):
            if child.text.strip():
                chunks[-1].spans.append(_convert_span(parent, child.text, ctx, scope))
            continue

        if child.tag != EId.TSPAN:
            ctx.log.warning("Unsupported text child '%s'.", child.tag)
            continue

        if child.has(AId.X) or child.has(AId.Y):
            chunks.append(_new_chunk(child, ctx, inherit=chunks[-1]))
        _collect(child, chunks, ctx, scope)


def _new_chunk(node: GenericNode, ctx: ResolveContext, inherit: TextChunk | None = None) -> TextChunk:
    anchor = _convert_anchor(get_keyword(node, AId.TEXT_ANCHOR))
    if anchor is None:
        anchor = inherit.anchor if inherit is not None else TextAnchor.START
    return TextChunk(
        x=get_number(node, AId.X, ctx.log),
        y=get_number(node, AId.Y, ctx.log),
        anchor=anchor,
    )


def _convert_span(node: GenericNode, text: str, ctx: ResolveContext, scope: Scope) -> TextSpan:
    return TextSpan(
        fill=convert_fill(node, ctx, scope),
        stroke=convert_stroke(node, ctx, scope),
        font=_convert_font(node, ctx),
        text=text,
    )


def _convert_font(node: GenericNode, ctx: ResolveContext) -> Font:
    size = get_number(node, AId.FONT_SIZE, ctx.log)
    if size is None or size <= 0:
        size = ctx.options.font_size
    return Font(
        family=get_string(node, AId.FONT_FAMILY) or ctx.options.font_family,
        size=size,
        style=_keyword_enum(FontStyle, get_keyword(node, AId.FONT_STYLE), FontStyle.NORMAL),
        variant=_keyword_enum(FontVariant, get_keyword(node, AId.FONT_VARIANT), FontVariant.NORMAL),
        weight=_keyword_enum(FontWeight, get_keyword(node, AId.FONT_WEIGHT), FontWeight.NORMAL),
        stretch=_keyword_enum(FontStretch, get_keyword(node, AId.FONT_STRETCH), FontStretch.NORMAL),
    )


def _convert_anchor(value: ValueId | None) -> TextAnchor | None:
    if value is None:
        return None
    return _keyword_enum(TextAnchor, value, TextAnchor.START)


def _keyword_enum(enum_cls, value: ValueId | None, default):
    # Scene enums share their markup spelling with ValueId.
    if value is None:
        return default
    try:
        return enum_cls(value.value)
    except ValueError:
        return default
