"""Attribute value codecs — parse markup strings into typed values and back.

Parsers raise ``ValueError`` on malformed input; the caller decides whether that
drops the attribute or the element. Formatters never fail on typed input.
"""

from __future__ import annotations

import logging
import math
import re

import svgpathtools
from PIL import ImageColor

from svgscene.diagnostics import diagnostics_logger
from svgscene.models.primitives import ClosePath, Color, CurveTo, LineTo, MoveTo, Rect, Transform
from svgscene.svg.ids import ValueId
from svgscene.svg.tree import AttributeValue, FuncLink, Length, Link, PathData

logger = logging.getLogger(__name__)

_NUMBER_RE = re.compile(r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?")
_LENGTH_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Z%]*)\s*$")
_SEPARATOR_RE = re.compile(r"[\s,]+")
_TRANSFORM_RE = re.compile(r"(matrix|translate|scale|rotate|skewX|skewY)\s*\(([^)]*)\)")
_FUNC_LINK_RE = re.compile(r"^\s*url\(\s*['\"]?#([^'\")]+)['\"]?\s*\)\s*$")
# One subpath per moveto, with each closepath on its own.
_SUBPATH_RE = re.compile(r"[Mm][^MmZz]*|[Zz]|[^MmZz]+")

# Largest sweep of one cubic approximating an arc, in degrees.
_MAX_ARC_SWEEP = 90.0

# User units per unit, at 1dpi; multiplied by the document DPI.
_ABSOLUTE_UNITS = {
    "in": 1.0,
    "cm": 1.0 / 2.54,
    "mm": 1.0 / 25.4,
    "pt": 1.0 / 72.0,
    "pc": 1.0 / 6.0,
}
# Units that depend on context the preprocessor should have resolved.
_RELATIVE_UNITS = {"%", "em", "ex"}


# --- Parsing ---


def parse_number(text: str) -> float:
    try:
        value = float(text.strip())
    except (AttributeError, ValueError):
        raise ValueError(f"invalid number: {text!r}") from None
    if not math.isfinite(value):
        raise ValueError(f"invalid number: {text!r}")
    return value


def parse_number_list(text: str) -> list[float]:
    parts = [p for p in _SEPARATOR_RE.split(text.strip()) if p]
    return [parse_number(p) for p in parts]


def parse_length(text: str, dpi: float = 96.0) -> float | Length:
    """Parse a length into user units; context-relative units stay a ``Length``."""
    m = _LENGTH_RE.match(text)
    if m is None:
        raise ValueError(f"invalid length: {text!r}")
    number = float(m.group(1))
    if not math.isfinite(number):
        raise ValueError(f"invalid length: {text!r}")
    unit = m.group(2)
    if unit in ("", "px"):
        return number
    if unit in _ABSOLUTE_UNITS:
        return number * _ABSOLUTE_UNITS[unit] * dpi
    if unit in _RELATIVE_UNITS:
        return Length(number, unit)
    raise ValueError(f"unknown unit in length: {text!r}")


def parse_color(text: str) -> Color:
    """Parse any CSS color syntax Pillow understands (names, #hex, rgb(), hsl())."""
    try:
        rgb = ImageColor.getrgb(text.strip())
    except ValueError:
        raise ValueError(f"invalid color: {text!r}") from None
    return Color(red=rgb[0], green=rgb[1], blue=rgb[2])


def parse_keyword(text: str) -> ValueId:
    try:
        return ValueId(text.strip())
    except ValueError:
        raise ValueError(f"unknown keyword: {text!r}") from None


def parse_view_box(text: str) -> Rect:
    numbers = parse_number_list(text)
    if len(numbers) != 4:
        raise ValueError(f"viewBox needs 4 numbers: {text!r}")
    x, y, w, h = numbers
    return Rect(x=x, y=y, width=w, height=h)


def parse_points(text: str) -> list[tuple[float, float]]:
    numbers = [float(n) for n in _NUMBER_RE.findall(text)]
    # An odd trailing coordinate is ignored, as browsers do.
    return [(numbers[i], numbers[i + 1]) for i in range(0, len(numbers) - 1, 2)]


def parse_func_link(text: str) -> FuncLink:
    m = _FUNC_LINK_RE.match(text)
    if m is None:
        raise ValueError(f"invalid url() reference: {text!r}")
    return FuncLink(m.group(1).strip())


def parse_link(text: str) -> Link | str:
    """``#id`` becomes a ``Link``; anything else (file path, data URI) stays a string."""
    text = text.strip()
    if text.startswith("#") and len(text) > 1:
        return Link(text[1:])
    return text


def parse_paint(text: str) -> Color | FuncLink | ValueId:
    text = text.strip()
    if text == "none":
        return ValueId.NONE
    if text.startswith("url("):
        # A fallback color after the link is dropped; the preprocessor resolves it.
        return parse_func_link(text.split(")")[0] + ")")
    return parse_color(text)


def parse_transform(text: str) -> Transform:
    """Compose an SVG transform list into a single matrix."""
    result = Transform.identity()
    consumed = 0
    for m in _TRANSFORM_RE.finditer(text):
        if text[consumed:m.start()].strip(" \t\r\n,"):
            raise ValueError(f"invalid transform: {text!r}")
        consumed = m.end()

        name = m.group(1)
        args = parse_number_list(m.group(2))
        n = len(args)
        if name == "matrix" and n == 6:
            ts = Transform(a=args[0], b=args[1], c=args[2], d=args[3], e=args[4], f=args[5])
        elif name == "translate" and n in (1, 2):
            ts = Transform.translate(args[0], args[1] if n == 2 else 0.0)
        elif name == "scale" and n in (1, 2):
            ts = Transform.scale(args[0], args[1] if n == 2 else None)
        elif name == "rotate" and n in (1, 3):
            ts = Transform.rotate(*args)
        elif name == "skewX" and n == 1:
            ts = Transform.skew_x(args[0])
        elif name == "skewY" and n == 1:
            ts = Transform.skew_y(args[0])
        else:
            raise ValueError(f"`{name}` transform does not accept {n} arguments")
        result = result.multiply(ts)

    if text[consumed:].strip(" \t\r\n,"):
        raise ValueError(f"invalid transform: {text!r}")
    return result


def parse_path_data(text: str, log: logging.Logger | None = None) -> PathData:
    """Parse ``d`` into absolute MoveTo/LineTo/CurveTo/ClosePath segments.

    svgpathtools parses one subpath at a time so that each explicit ``Z``
    survives as a ClosePath. Quadratics are elevated to cubics and arcs are
    split into cubics of at most a quarter turn. A syntax error ends the path:
    the subpaths before the one holding the error are kept. Path data that
    does not start with a moveto is invalid.
    """
    log = diagnostics_logger(log, logger)
    text = text.strip()
    if not text:
        return []
    if text[0] not in "Mm":
        raise ValueError(f"path data must start with a moveto: {text[:20]!r}")

    segments: PathData = []
    pos = start = 0j
    for chunk in _SUBPATH_RE.findall(text):
        if chunk in ("Z", "z"):
            if segments and not isinstance(segments[-1], (MoveTo, ClosePath)):
                segments.append(ClosePath())
            pos = start
            continue
        if not chunk.strip():
            continue

        # svgpathtools asserts on arcs whose end points coincide.
        try:
            path = svgpathtools.parse_path(chunk, current_pos=pos)
            if chunk[0] in "Mm":
                start = path.start if len(path) else _moveto_target(chunk, pos)
        except (ValueError, AssertionError) as e:
            log.warning("Path data truncated: %s", e)
            break

        # Drawing after Z starts a new subpath at the closed subpath's start.
        if segments and isinstance(segments[-1], MoveTo):
            segments.pop()
        segments.append(MoveTo(x=start.real, y=start.imag))
        for seg in path:
            segments.extend(_convert_segment(seg))
        pos = path.end if len(path) else start

    if segments and isinstance(segments[-1], MoveTo):
        segments.pop()
    return segments


def _moveto_target(chunk: str, pos: complex) -> complex:
    # A lone moveto yields no segments; a zero-length line reveals where it went.
    return svgpathtools.parse_path(chunk + " l 0 0", current_pos=pos).end


def _convert_segment(seg) -> list[LineTo | CurveTo]:
    if isinstance(seg, svgpathtools.Line):
        return [LineTo(x=seg.end.real, y=seg.end.imag)]
    if isinstance(seg, svgpathtools.QuadraticBezier):
        c1 = seg.start + 2.0 / 3.0 * (seg.control - seg.start)
        c2 = seg.end + 2.0 / 3.0 * (seg.control - seg.end)
        return [_curve_to(c1, c2, seg.end)]
    if isinstance(seg, svgpathtools.Arc):
        count = max(1, math.ceil(abs(seg.delta) / _MAX_ARC_SWEEP - 1e-9))
        return [_curve_to(c.control1, c.control2, c.end) for c in seg.as_cubic_curves(count)]
    return [_curve_to(seg.control1, seg.control2, seg.end)]


def _curve_to(c1: complex, c2: complex, end: complex) -> CurveTo:
    return CurveTo(x1=c1.real, y1=c1.imag, x2=c2.real, y2=c2.imag, x=end.real, y=end.imag)


# --- Formatting ---


def format_number(value: float) -> str:
    """Shortest string that parses back to the same float."""
    if value == 0:
        return "0"
    text = repr(float(value))
    if text.endswith(".0"):
        text = text[:-2]
    return text


def format_number_list(values: list[float]) -> str:
    return " ".join(format_number(v) for v in values)


def format_color(color: Color) -> str:
    return f"#{color.red:02x}{color.green:02x}{color.blue:02x}"


def format_transform(ts: Transform) -> str:
    return "matrix(" + " ".join(format_number(v) for v in ts.as_tuple()) + ")"


def format_view_box(rect: Rect) -> str:
    return format_number_list([rect.x, rect.y, rect.width, rect.height])


def format_points(points: list[tuple[float, float]]) -> str:
    return " ".join(f"{format_number(x)},{format_number(y)}" for x, y in points)


def format_path_data(segments: PathData) -> str:
    parts: list[str] = []
    for seg in segments:
        if isinstance(seg, MoveTo):
            parts.append(f"M {format_number(seg.x)} {format_number(seg.y)}")
        elif isinstance(seg, LineTo):
            parts.append(f"L {format_number(seg.x)} {format_number(seg.y)}")
        elif isinstance(seg, CurveTo):
            coords = (seg.x1, seg.y1, seg.x2, seg.y2, seg.x, seg.y)
            parts.append("C " + " ".join(format_number(v) for v in coords))
        else:
            parts.append("Z")
    return " ".join(parts)


def format_value(value: AttributeValue) -> str:
    if isinstance(value, bool):
        raise TypeError("boolean attribute values are not supported")
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, Color):
        return format_color(value)
    if isinstance(value, Transform):
        return format_transform(value)
    if isinstance(value, Rect):
        return format_view_box(value)
    if isinstance(value, (ValueId, FuncLink, Link, Length)):
        return str(value)
    if isinstance(value, list):
        if not value:
            return ""
        first = value[0]
        if isinstance(first, tuple):
            return format_points(value)
        if isinstance(first, (MoveTo, LineTo, CurveTo, ClosePath)):
            return format_path_data(value)
        return format_number_list(value)
    return str(value)
