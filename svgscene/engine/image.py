"""image → Image node.

Embedded ``data:`` URIs are decoded and their format sniffed with Pillow; any
other href is kept as a file path for the renderer to load. A payload that
cannot be decoded keeps the declared rectangle without pixel content.
"""

from __future__ import annotations

import base64
import binascii
import io
import re
from urllib.parse import unquote_to_bytes

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from svgscene.engine.attributes import get_number_or, get_string, get_transform
from svgscene.engine.context import ResolveContext
from svgscene.models.nodes import Image, ImageData, ImageKind, ImagePath, ImageRaw
from svgscene.models.primitives import Rect
from svgscene.models.scene_document import ContentBuilder
from svgscene.svg.ids import AId
from svgscene.svg.tree import GenericNode

_DATA_URI_RE = re.compile(r"^data:([^;,]*)((?:;[^;,]*)*),(.*)$", re.DOTALL)

_PIL_FORMATS = {"PNG": ImageKind.PNG, "JPEG": ImageKind.JPEG}
_MIME_SUBTYPES = {"png": ImageKind.PNG, "jpeg": ImageKind.JPEG, "jpg": ImageKind.JPEG}


def convert(node: GenericNode, depth: int, builder: ContentBuilder, ctx: ResolveContext) -> Image | None:
    log = ctx.log
    rect = Rect(
        x=get_number_or(node, AId.X, 0.0, log),
        y=get_number_or(node, AId.Y, 0.0, log),
        width=get_number_or(node, AId.WIDTH, 0.0, log),
        height=get_number_or(node, AId.HEIGHT, 0.0, log),
    )
    if not rect.is_valid():
        log.warning("Image '%s' has an invalid size. Skipped.", node.id)
        return None

    href = get_string(node, AId.XLINK_HREF)
    data = _convert_href(href, ctx) if href else None
    if data is None:
        log.warning("Image '%s' has no usable data; only its rectangle is kept.", node.id)

    image = Image(id=node.id, rect=rect, transform=get_transform(node), data=data)
    builder.append(depth, image)
    return image


def _convert_href(href: str, ctx: ResolveContext) -> ImageData | None:
    if href.startswith("data:"):
        return _convert_data_uri(href, ctx)

    path = href
    if ctx.options.resources_dir is not None and "://" not in href:
        path = str(ctx.options.resources_dir / href)
    return ImagePath(path=path)


def _convert_data_uri(href: str, ctx: ResolveContext) -> ImageRaw | None:
    m = _DATA_URI_RE.match(href)
    if m is None:
        ctx.log.warning("Malformed data URI.")
        return None

    mime, params, payload = m.group(1).strip().lower(), m.group(2), m.group(3)
    try:
        if ";base64" in params.lower():
            data = base64.b64decode("".join(payload.split()), validate=True)
        else:
            data = unquote_to_bytes(payload)
    except (binascii.Error, ValueError) as e:
        ctx.log.warning("Failed to decode an embedded image: %s", e)
        return None

    kind = sniff_kind(data)
    if kind is None:
        kind = _MIME_SUBTYPES.get(mime.partition("/")[2])
        if kind is None:
            ctx.log.warning("Unsupported embedded image type '%s'.", mime or "unknown")
            return None
        ctx.log.warning("Embedded image is not a readable %s; kept as declared.", kind.value)
    return ImageRaw(data=data, format=kind)


def sniff_kind(data: bytes) -> ImageKind | None:
    """Detect PNG/JPEG payloads without decoding the pixels."""
    try:
        with PILImage.open(io.BytesIO(data)) as img:
            return _PIL_FORMATS.get(img.format or "")
    except (UnidentifiedImageError, OSError, ValueError):
        return None
