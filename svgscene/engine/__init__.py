"""Forward resolver: generic tree → scene document."""

from svgscene.engine.options import ResolveOptions
from svgscene.engine.resolver import resolve, resolve_svg

__all__ = [
    "ResolveOptions",
    "resolve",
    "resolve_svg",
]
