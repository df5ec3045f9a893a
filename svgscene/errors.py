"""Error types surfaced to callers.

Only the conversion errors below abort a conversion; every other anomaly is
logged and the offending element is dropped.
"""

from __future__ import annotations

import enum


class ErrorKind(str, enum.Enum):
    MISSING_SVG_NODE = "missing_svg_node"
    INVALID_SIZE = "invalid_size"
    INVALID_VIEW_BOX = "invalid_view_box"


_MESSAGES = {
    ErrorKind.MISSING_SVG_NODE: "the document has no root 'svg' element",
    ErrorKind.INVALID_SIZE: "the root 'svg' element has no valid width/height",
    ErrorKind.INVALID_VIEW_BOX: "the root 'svg' element has no valid viewBox",
}


class ConversionError(Exception):
    """The generic tree violates the preprocessor contract; no document can be built."""

    def __init__(self, kind: ErrorKind, message: str | None = None) -> None:
        self.kind = kind
        self.message = message or _MESSAGES[kind]
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.kind.value


class SvgParseError(ValueError):
    """Raised when markup handed to the parser is not well-formed XML."""
