"""Scene document node types — the resolved, strongly typed side of the converter.

Keyword attributes are closed enums; every optional presentation value has a
single default, defined here as the field default.
"""

from __future__ import annotations

import enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from svgscene.models.primitives import Color, PathSegment, Rect, Size, Transform


class Units(str, enum.Enum):
    USER_SPACE_ON_USE = "userSpaceOnUse"
    OBJECT_BOUNDING_BOX = "objectBoundingBox"


class SpreadMethod(str, enum.Enum):
    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"


class FillRule(str, enum.Enum):
    NON_ZERO = "nonzero"
    EVEN_ODD = "evenodd"


class LineCap(str, enum.Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(str, enum.Enum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


class TextAnchor(str, enum.Enum):
    START = "start"
    MIDDLE = "middle"
    END = "end"


class FontStyle(str, enum.Enum):
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


class FontVariant(str, enum.Enum):
    NORMAL = "normal"
    SMALL_CAPS = "small-caps"


class FontWeight(str, enum.Enum):
    NORMAL = "normal"
    BOLD = "bold"
    BOLDER = "bolder"
    LIGHTER = "lighter"
    W100 = "100"
    W200 = "200"
    W300 = "300"
    W400 = "400"
    W500 = "500"
    W600 = "600"
    W700 = "700"
    W800 = "800"
    W900 = "900"


class FontStretch(str, enum.Enum):
    NORMAL = "normal"
    WIDER = "wider"
    NARROWER = "narrower"
    ULTRA_CONDENSED = "ultra-condensed"
    EXTRA_CONDENSED = "extra-condensed"
    CONDENSED = "condensed"
    SEMI_CONDENSED = "semi-condensed"
    SEMI_EXPANDED = "semi-expanded"
    EXPANDED = "expanded"
    EXTRA_EXPANDED = "extra-expanded"
    ULTRA_EXPANDED = "ultra-expanded"


class ImageKind(str, enum.Enum):
    PNG = "png"
    JPEG = "jpeg"


# --- Paint ---


class ColorPaint(BaseModel):
    kind: Literal["color"] = "color"
    color: Color


class LinkPaint(BaseModel):
    """Paint server by position in the definitions list."""

    kind: Literal["link"] = "link"
    index: int = Field(..., ge=0)


Paint = Annotated[Union[ColorPaint, LinkPaint], Field(discriminator="kind")]


class Fill(BaseModel):
    paint: Paint
    opacity: float = 1.0
    rule: FillRule = FillRule.NON_ZERO


class Stroke(BaseModel):
    paint: Paint
    width: float = 1.0
    linecap: LineCap = LineCap.BUTT
    linejoin: LineJoin = LineJoin.MITER
    miterlimit: float = 4.0
    dasharray: list[float] | None = None
    dashoffset: float = 0.0
    opacity: float = 1.0


# --- Definitions ---


class Stop(BaseModel):
    offset: float = 0.0
    color: Color = Field(default_factory=Color.black)
    opacity: float = 1.0


class BaseGradient(BaseModel):
    units: Units = Units.USER_SPACE_ON_USE
    transform: Transform = Field(default_factory=Transform.identity)
    spread_method: SpreadMethod = SpreadMethod.PAD
    stops: list[Stop] = Field(default_factory=list)


class LinearGradient(BaseModel):
    kind: Literal["linear_gradient"] = "linear_gradient"
    id: str
    x1: float = 0.0
    y1: float = 0.0
    x2: float = 1.0
    y2: float = 0.0
    base: BaseGradient = Field(default_factory=BaseGradient)


class RadialGradient(BaseModel):
    kind: Literal["radial_gradient"] = "radial_gradient"
    id: str
    cx: float = 0.5
    cy: float = 0.5
    r: float = 0.5
    fx: float = 0.5
    fy: float = 0.5
    base: BaseGradient = Field(default_factory=BaseGradient)


class ClipPath(BaseModel):
    kind: Literal["clip_path"] = "clip_path"
    id: str
    units: Units = Units.USER_SPACE_ON_USE
    transform: Transform = Field(default_factory=Transform.identity)
    children: list[ContentNode] = Field(default_factory=list)


class Pattern(BaseModel):
    kind: Literal["pattern"] = "pattern"
    id: str
    rect: Rect
    view_box: Rect | None = None
    units: Units = Units.USER_SPACE_ON_USE
    content_units: Units = Units.USER_SPACE_ON_USE
    transform: Transform = Field(default_factory=Transform.identity)
    children: list[ContentNode] = Field(default_factory=list)


DefsNode = Annotated[
    Union[LinearGradient, RadialGradient, ClipPath, Pattern],
    Field(discriminator="kind"),
]


# --- Content ---


class Font(BaseModel):
    family: str
    size: float
    style: FontStyle = FontStyle.NORMAL
    variant: FontVariant = FontVariant.NORMAL
    weight: FontWeight = FontWeight.NORMAL
    stretch: FontStretch = FontStretch.NORMAL


class TextSpan(BaseModel):
    fill: Fill | None = None
    stroke: Stroke | None = None
    font: Font
    text: str


class TextChunk(BaseModel):
    x: float | None = None
    y: float | None = None
    anchor: TextAnchor = TextAnchor.START
    spans: list[TextSpan] = Field(default_factory=list)


class ImagePath(BaseModel):
    kind: Literal["path"] = "path"
    path: str


class ImageRaw(BaseModel):
    model_config = ConfigDict(ser_json_bytes="base64")

    kind: Literal["raw"] = "raw"
    data: bytes
    format: ImageKind


ImageData = Annotated[Union[ImagePath, ImageRaw], Field(discriminator="kind")]


class Group(BaseModel):
    kind: Literal["group"] = "group"
    id: str = ""
    transform: Transform = Field(default_factory=Transform.identity)
    opacity: float | None = None
    clip_path: int | None = Field(None, ge=0)
    children: list[ContentNode] = Field(default_factory=list)


class Path(BaseModel):
    kind: Literal["path"] = "path"
    id: str = ""
    transform: Transform = Field(default_factory=Transform.identity)
    segments: list[PathSegment]
    fill: Fill | None = None
    stroke: Stroke | None = None


class Text(BaseModel):
    kind: Literal["text"] = "text"
    id: str = ""
    transform: Transform = Field(default_factory=Transform.identity)
    chunks: list[TextChunk] = Field(default_factory=list)


class Image(BaseModel):
    kind: Literal["image"] = "image"
    id: str = ""
    rect: Rect
    transform: Transform = Field(default_factory=Transform.identity)
    data: ImageData | None = None


ContentNode = Annotated[Union[Group, Path, Text, Image], Field(discriminator="kind")]

# Node kinds that open a new nesting level when inserted.
CONTAINER_KINDS = (Group,)


class Svg(BaseModel):
    """Root metadata."""

    size: Size
    view_box: Rect
    dpi: float = 96.0


ClipPath.model_rebuild()
Pattern.model_rebuild()
Group.model_rebuild()
