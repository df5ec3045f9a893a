"""Element, attribute and keyword ids of the generic SVG tree.

Every enum value is the name as it appears in markup, so ``EId("linearGradient")``
and ``AId("stroke-width")`` work directly on parsed tag/attribute names.
"""

from __future__ import annotations

import enum


class EId(str, enum.Enum):
    """Element ids."""

    SVG = "svg"
    DEFS = "defs"
    G = "g"
    TITLE = "title"
    DESC = "desc"
    METADATA = "metadata"
    USE = "use"
    SWITCH = "switch"
    SYMBOL = "symbol"
    STYLE = "style"
    PATH = "path"
    LINE = "line"
    RECT = "rect"
    POLYLINE = "polyline"
    POLYGON = "polygon"
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    TEXT = "text"
    TSPAN = "tspan"
    IMAGE = "image"
    LINEAR_GRADIENT = "linearGradient"
    RADIAL_GRADIENT = "radialGradient"
    STOP = "stop"
    CLIP_PATH = "clipPath"
    PATTERN = "pattern"
    MASK = "mask"
    FILTER = "filter"
    MARKER = "marker"

    def __str__(self) -> str:
        return self.value


class AId(str, enum.Enum):
    """Attribute ids."""

    ID = "id"
    XMLNS = "xmlns"
    XMLNS_XLINK = "xmlns:xlink"
    WIDTH = "width"
    HEIGHT = "height"
    VIEW_BOX = "viewBox"
    X = "x"
    Y = "y"
    X1 = "x1"
    Y1 = "y1"
    X2 = "x2"
    Y2 = "y2"
    CX = "cx"
    CY = "cy"
    R = "r"
    RX = "rx"
    RY = "ry"
    FX = "fx"
    FY = "fy"
    D = "d"
    POINTS = "points"
    TRANSFORM = "transform"
    GRADIENT_TRANSFORM = "gradientTransform"
    PATTERN_TRANSFORM = "patternTransform"
    GRADIENT_UNITS = "gradientUnits"
    PATTERN_UNITS = "patternUnits"
    PATTERN_CONTENT_UNITS = "patternContentUnits"
    CLIP_PATH_UNITS = "clipPathUnits"
    SPREAD_METHOD = "spreadMethod"
    OFFSET = "offset"
    STOP_COLOR = "stop-color"
    STOP_OPACITY = "stop-opacity"
    OPACITY = "opacity"
    CLIP_PATH = "clip-path"
    CLIP_RULE = "clip-rule"
    FILL = "fill"
    FILL_OPACITY = "fill-opacity"
    FILL_RULE = "fill-rule"
    STROKE = "stroke"
    STROKE_OPACITY = "stroke-opacity"
    STROKE_WIDTH = "stroke-width"
    STROKE_LINECAP = "stroke-linecap"
    STROKE_LINEJOIN = "stroke-linejoin"
    STROKE_MITERLIMIT = "stroke-miterlimit"
    STROKE_DASHARRAY = "stroke-dasharray"
    STROKE_DASHOFFSET = "stroke-dashoffset"
    TEXT_ANCHOR = "text-anchor"
    FONT_FAMILY = "font-family"
    FONT_SIZE = "font-size"
    FONT_STYLE = "font-style"
    FONT_VARIANT = "font-variant"
    FONT_WEIGHT = "font-weight"
    FONT_STRETCH = "font-stretch"
    XLINK_HREF = "xlink:href"
    XMLNS_SVGSCENE = "xmlns:svgscene"
    SVGSCENE_VERSION = "svgscene:version"

    def __str__(self) -> str:
        return self.value


class ValueId(str, enum.Enum):
    """Predefined keyword values."""

    NONE = "none"
    PAD = "pad"
    REFLECT = "reflect"
    REPEAT = "repeat"
    USER_SPACE_ON_USE = "userSpaceOnUse"
    OBJECT_BOUNDING_BOX = "objectBoundingBox"
    NONZERO = "nonzero"
    EVENODD = "evenodd"
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"
    MITER = "miter"
    BEVEL = "bevel"
    START = "start"
    MIDDLE = "middle"
    END = "end"
    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"
    SMALL_CAPS = "small-caps"
    BOLD = "bold"
    BOLDER = "bolder"
    LIGHTER = "lighter"
    N100 = "100"
    N200 = "200"
    N300 = "300"
    N400 = "400"
    N500 = "500"
    N600 = "600"
    N700 = "700"
    N800 = "800"
    N900 = "900"
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

    def __str__(self) -> str:
        return self.value


# Elements converted by the shape collaborator.
SHAPE_ELEMENTS = frozenset({EId.LINE, EId.RECT, EId.POLYLINE, EId.POLYGON, EId.CIRCLE, EId.ELLIPSE})

# Elements that are never converted and never reported.
SKIPPED_ELEMENTS = frozenset({EId.TITLE, EId.DESC, EId.METADATA, EId.DEFS})
