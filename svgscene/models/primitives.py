"""Value types shared by the generic tree and the scene document."""

from __future__ import annotations

import math
from typing import Annotated, Literal, Union

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, ConfigDict, Field

from svgscene.utils.math_helpers import fuzzy_eq


class Color(BaseModel):
    model_config = ConfigDict(frozen=True)

    red: int = Field(0, ge=0, le=255)
    green: int = Field(0, ge=0, le=255)
    blue: int = Field(0, ge=0, le=255)

    @classmethod
    def black(cls) -> Color:
        return cls(red=0, green=0, blue=0)


class Size(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: float
    height: float


class Rect(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def is_valid(self) -> bool:
        return self.width > 0 and self.height > 0

    def rounded(self) -> Rect:
        return Rect(x=round(self.x), y=round(self.y), width=round(self.width), height=round(self.height))


class Transform(BaseModel):
    """2D affine transform ``[a c e; b d f; 0 0 1]`` in SVG order."""

    model_config = ConfigDict(frozen=True)

    a: float = 1.0
    b: float = 0.0
    c: float = 0.0
    d: float = 1.0
    e: float = 0.0
    f: float = 0.0

    @classmethod
    def identity(cls) -> Transform:
        return cls()

    @classmethod
    def translate(cls, tx: float, ty: float = 0.0) -> Transform:
        return cls(e=tx, f=ty)

    @classmethod
    def scale(cls, sx: float, sy: float | None = None) -> Transform:
        return cls(a=sx, d=sx if sy is None else sy)

    @classmethod
    def rotate(cls, degrees: float, cx: float = 0.0, cy: float = 0.0) -> Transform:
        rad = math.radians(degrees)
        cos, sin = math.cos(rad), math.sin(rad)
        rotation = cls(a=cos, b=sin, c=-sin, d=cos)
        if cx == 0.0 and cy == 0.0:
            return rotation
        return cls.translate(cx, cy).multiply(rotation).multiply(cls.translate(-cx, -cy))

    @classmethod
    def skew_x(cls, degrees: float) -> Transform:
        return cls(c=math.tan(math.radians(degrees)))

    @classmethod
    def skew_y(cls, degrees: float) -> Transform:
        return cls(b=math.tan(math.radians(degrees)))

    @classmethod
    def from_matrix(cls, m: NDArray[np.float64]) -> Transform:
        return cls(
            a=float(m[0, 0]), b=float(m[1, 0]),
            c=float(m[0, 1]), d=float(m[1, 1]),
            e=float(m[0, 2]), f=float(m[1, 2]),
        )

    def to_matrix(self) -> NDArray[np.float64]:
        return np.array(
            [[self.a, self.c, self.e], [self.b, self.d, self.f], [0.0, 0.0, 1.0]],
            dtype=np.float64,
        )

    def multiply(self, other: Transform) -> Transform:
        """Return ``self * other`` (``other`` is applied first)."""
        return Transform.from_matrix(self.to_matrix() @ other.to_matrix())

    def apply(self, x: float, y: float) -> tuple[float, float]:
        return (self.a * x + self.c * y + self.e, self.b * x + self.d * y + self.f)

    def is_default(self, eps: float | None = None) -> bool:
        """Identity within the configured float epsilon."""
        identity = (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
        return all(fuzzy_eq(v, ref, eps) for v, ref in zip(self.as_tuple(), identity))

    def as_tuple(self) -> tuple[float, float, float, float, float, float]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)


# --- Path data (absolute, already flattened to M/L/C/Z) ---


class MoveTo(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["M"] = "M"
    x: float
    y: float


class LineTo(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["L"] = "L"
    x: float
    y: float


class CurveTo(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["C"] = "C"
    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float


class ClosePath(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["Z"] = "Z"


PathSegment = Annotated[Union[MoveTo, LineTo, CurveTo, ClosePath], Field(discriminator="kind")]
