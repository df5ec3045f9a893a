"""Math helpers — fuzzy float comparison and clamping. No engine imports."""

from __future__ import annotations

import math

from svgscene.config import settings


def fuzzy_eq(a: float, b: float, eps: float | None = None) -> bool:
    """Absolute-tolerance float equality. Used for default omission."""
    tol = settings.float_epsilon if eps is None else eps
    return math.isclose(a, b, rel_tol=0.0, abs_tol=tol)


def fuzzy_ne(a: float, b: float, eps: float | None = None) -> bool:
    return not fuzzy_eq(a, b, eps)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))
