"""svgscene — resolve generic SVG trees into typed scene documents and back."""

__version__ = "0.1.0"

from svgscene.engine.options import ResolveOptions
from svgscene.engine.resolver import resolve, resolve_svg
from svgscene.errors import ConversionError, ErrorKind, SvgParseError
from svgscene.models.scene_document import SceneDocument
from svgscene.svg.parser import parse_svg
from svgscene.svg.serializer import serialize, serialize_svg
from svgscene.svg.writer import write_svg

__all__ = [
    "ConversionError",
    "ErrorKind",
    "ResolveOptions",
    "SceneDocument",
    "SvgParseError",
    "parse_svg",
    "resolve",
    "resolve_svg",
    "serialize",
    "serialize_svg",
    "write_svg",
]
